"""Encrypted attachment descriptor."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr


class JsonWebKey(BaseModel):
    """
    Key material used to decrypt an attachment.

    Values are carried as-is; this package never performs cryptography.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    kty: StrictStr
    key_ops: list[StrictStr]
    alg: StrictStr
    k: StrictStr
    ext: StrictBool


class EncryptedFile(BaseModel):
    """
    An encrypted file referenced by a message.

    Serializes as a nested JSON object under the `file` key of the content.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: StrictStr
    key: JsonWebKey
    iv: StrictStr
    hashes: dict[StrictStr, StrictStr]
    v: StrictStr
