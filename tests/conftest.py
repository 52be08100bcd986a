import pytest

from op2pass.config import Config


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
