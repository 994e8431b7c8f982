import pathlib
import sys
from typing import Any

import pytest

# Ensure src/ is on sys.path so `import media_events` works without installing
SRC_ROOT = pathlib.Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from media_events import EncryptedFile  # noqa: E402


@pytest.fixture()
def encrypted_file_wire() -> dict[str, Any]:
    return {
        "url": "mxc://example.org/secret",
        "key": {
            "kty": "oct",
            "key_ops": ["encrypt", "decrypt"],
            "alg": "A256CTR",
            "k": "qcHVMSgYg-71CauWBezXI5qkaRb0LuIy-Wx5kIaHMIA",
            "ext": True,
        },
        "iv": "X85+XgHN+HEAAAAAAAAAAA",
        "hashes": {"sha256": "5qG4fFnbbVdlAW9C8XXUhFWXnMhWKL8R9Yw4Ll4QgWk"},
        "v": "v2",
    }


@pytest.fixture()
def encrypted_file(encrypted_file_wire) -> EncryptedFile:
    return EncryptedFile.model_validate(encrypted_file_wire)


@pytest.fixture()
def plain_wire() -> dict[str, Any]:
    return {
        "msgtype": "m.audio",
        "body": "cat.ogg",
        "url": "mxc://example.org/abc",
    }
