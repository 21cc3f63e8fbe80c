"""Request signing.

The provider authenticates a request by a digest over its sorted query
parameters followed by the private key::

    sign = md5("k1=v1&k2=v2..." + private_key)

Parameters named ``sign`` or ``key`` (any case) and parameters with empty
values are left out of the signed string.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping

SIGNATURE_KEY = "sign"
CREDENTIAL_KEY = "key"
TIMESTAMP_KEY = "t"
DEFAULT_DIGEST = "md5"

_RESERVED = {SIGNATURE_KEY, CREDENTIAL_KEY}


def canonicalize(params: Mapping[str, str]) -> str:
    """Build the deterministic signing string for ``params``.

    Keys are sorted by their UTF-8 bytes so the order matches the provider's
    reference implementation for non-ASCII keys too.
    """
    pairs = []
    for key in sorted(params, key=lambda k: k.encode("utf-8")):
        value = params[key]
        if key.lower() in _RESERVED or value == "":
            continue
        pairs.append(f"{key}={value}")
    return "&".join(pairs)


def sign(canonical: str, secret: str, algorithm: str = DEFAULT_DIGEST) -> str:
    digest = hashlib.new(algorithm)
    digest.update((canonical + secret).encode("utf-8"))
    return digest.hexdigest()


def sign_params(
    params: Mapping[str, str],
    secret: str,
    algorithm: str = DEFAULT_DIGEST,
) -> dict[str, str]:
    """Return a copy of ``params`` with the signature attached."""
    signed = {k: v for k, v in params.items() if k.lower() != SIGNATURE_KEY}
    signed[SIGNATURE_KEY] = sign(canonicalize(signed), secret, algorithm)
    return signed


def check_algorithm(algorithm: str) -> str:
    if algorithm not in hashlib.algorithms_available:
        raise ValueError(f"Unsupported digest algorithm: {algorithm}")
    return algorithm
