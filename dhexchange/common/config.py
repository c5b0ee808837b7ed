"""
Group parameters from the environment / .env file.

  DH_GENERATOR   decimal or 0x-prefixed hex (default 2)
  DH_MODULUS     decimal or 0x-prefixed hex (default RFC 3526 group 14)
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from dhexchange.common.protocol import DhParams
from dhexchange.crypto.dh import DHExchange, InvalidParameter

logger = logging.getLogger(__name__)

# RFC 3526 group 14: 2048-bit MODP group
# https://datatracker.ietf.org/doc/html/rfc3526#section-3
RFC3526_2048_P = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF05"
    "98DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB"
    "9ED529070796966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718"
    "3995497CEA956AE515D2261898FA051015728E5A8AACAA68FFFFFFFFFFFFFFFF", 16
)
RFC3526_2048_G = 2


def parse_int(name: str, raw: str) -> int:
    """Parse a decimal or 0x-prefixed hex value."""
    text = raw.strip().replace("_", "")
    try:
        if text.lower().startswith("0x"):
            return int(text[2:], 16)
        return int(text, 10)
    except ValueError:
        raise InvalidParameter(f"{name} is not an integer: {raw!r}") from None


def load_params(env_file: Optional[str] = None) -> DhParams:
    """
    Read DH_GENERATOR / DH_MODULUS, loading a .env file first if one exists.
    Variables already set in the process environment win over the file.
    """
    load_dotenv(env_file)

    raw_g = os.getenv("DH_GENERATOR")
    raw_p = os.getenv("DH_MODULUS")
    g = parse_int("DH_GENERATOR", raw_g) if raw_g else RFC3526_2048_G
    p = parse_int("DH_MODULUS", raw_p) if raw_p else RFC3526_2048_P

    if raw_p is None:
        logger.debug("DH_MODULUS not set, using RFC 3526 group 14")

    try:
        return DhParams(g=g, p=p)
    except ValidationError as e:
        raise InvalidParameter(f"bad DH parameters from environment: {e.errors()[0]['msg']}") from e


def load_exchange(env_file: Optional[str] = None) -> DHExchange:
    return DHExchange.from_params(load_params(env_file))
