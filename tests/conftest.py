import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from meat_quality.core.config import settings


class FakeEngine:
    """Returns a fixed confidence vector and remembers what it was fed."""

    def __init__(self, output=(0.1, 0.7, 0.2)):
        self.output = np.array(output, dtype=np.float32)
        self.inputs = []
        self.close_calls = 0

    def infer(self, tensor):
        self.inputs.append(tensor)
        return self.output

    def close(self):
        self.close_calls += 1


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def media_dir(tmp_path, monkeypatch):
    d = tmp_path / "media"
    d.mkdir()
    monkeypatch.setattr(settings, "MEDIA_DIR", str(d))
    return d


@pytest.fixture
def make_client(monkeypatch, media_dir):
    import meat_quality.main as main

    def _make(engine=None, load_error=None, auth_enabled=False):
        monkeypatch.setattr(settings, "AUTH_ENABLED", auth_enabled)
        monkeypatch.setattr(settings, "JWT_SECRET", "test-secret-for-camera-permission-tokens")

        def _load(path):
            if load_error is not None:
                raise load_error
            return engine

        monkeypatch.setattr(main, "load_engine", _load)
        return TestClient(main.app)

    return _make


def png_bytes(color=(200, 30, 30), size=(64, 48)):
    from meat_quality.services.display import pil_to_png_bytes

    return pil_to_png_bytes(Image.new("RGB", size, color))
