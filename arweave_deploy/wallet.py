"""
Wallet (JWK) loading
"""
import base64
import binascii
import json
from pathlib import Path
from typing import Any, Dict

from .errors import WalletFormatError, WalletNotFoundError


def parse_wallet(data: str) -> Dict[str, Any]:
    """Parse a JWK given either as JSON or as base64 encoded JSON"""
    try:
        jwk = json.loads(data)
    except json.JSONDecodeError:
        try:
            jwk = json.loads(base64.b64decode(data.strip()).decode("utf-8"))
        except (binascii.Error, ValueError) as e:
            raise WalletFormatError("Invalid wallet format. Must be JSON or base64 encoded JSON") from e

    if not isinstance(jwk, dict):
        raise WalletFormatError("Invalid wallet format. Must be JSON or base64 encoded JSON")
    return jwk


def load_wallet(path: Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.is_file():
        raise WalletNotFoundError(f"{path.name} not found in project root")
    return parse_wallet(path.read_text(encoding="utf-8"))
