"""Protocol constants shared by the canonicalizer, digest engine and verifier."""

from __future__ import annotations

from typing import Final

__all__ = [
    "ADDRESS_HEX_LENGTH",
    "DECLARATION",
    "DIGEST_SIZE",
    "HEX_PREFIX",
    "PUBLIC_KEY_HEX_LENGTH",
    "SIGNATURE_HEX_LENGTH",
]

HEX_PREFIX: Final[str] = "0x"

# Expected lengths in hex characters once the prefix is removed.
PUBLIC_KEY_HEX_LENGTH: Final[int] = 64
ADDRESS_HEX_LENGTH: Final[int] = 40
SIGNATURE_HEX_LENGTH: Final[int] = 128

# Blake2b-512
DIGEST_SIZE: Final[int] = 64

# Part of the protocol: any change invalidates every issued declaration signature.
DECLARATION: Final[str] = (
    "I hereby cryptographically prove to be a contributor of Tezos Stiftung "
    "(CHE-290.597.458), a Swiss Foundation based in Gubelstrasse 11, 6300 Zug, "
    "Switzerland. I recognize and welcome the existence multiple implementations "
    "of Tezos. I ask and expect Tezos Stiftung to foster competition among them "
    "by funding and supporting their development, marketing and growth. Funds "
    "allotted to various Tezos implementations shall always be directly "
    "proportional to their market capitalization at the time of each "
    "distribution of funds. Distribution of funds to multiple existing Tezos "
    "implementations shall begin no later than January 1st 2019 and "
    "consistently continue throughout time. Following priorities autonomously "
    "set by each community, Tezos Stiftung shall distribute funds in the most "
    "appropriate, effective and transparent way."
)
