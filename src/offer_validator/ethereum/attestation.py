"""Attestation generator - signs (offerId, result) for the offers contract.

The contract verifies ``ecrecover(keccak256(abi.encode(offerId, result)), v, r, s)``
against the validator address, so the encoding is the standard (non-packed)
ABI encoding of ``(uint256, bool)`` and the raw hash is signed without an
EIP-191 prefix.
"""

from __future__ import annotations

import logging

from eth_abi import encode
from eth_account import Account
from eth_keys import keys
from eth_utils import keccak, to_bytes

from offer_validator.errors import SigningError
from offer_validator.models.records import Attestation

log = logging.getLogger(__name__)

ATTESTATION_TYPES = ["uint256", "bool"]


def encode_outcome(offer_id: int, result: bool) -> bytes:
    """ABI-encode the outcome as two 32-byte words."""
    return encode(ATTESTATION_TYPES, [offer_id, result])


def message_hash(offer_id: int, result: bool) -> bytes:
    return keccak(encode_outcome(offer_id, result))


def _hex32(value: int) -> str:
    return "0x" + value.to_bytes(32, "big").hex()


def recover_signer(offer_id: int, result: bool, v: int, r: str, s: str) -> str:
    """Return the checksummed address that produced an attestation."""
    signature = keys.Signature(
        vrs=(v - 27 if v >= 27 else v, int.from_bytes(to_bytes(hexstr=r), "big"),
             int.from_bytes(to_bytes(hexstr=s), "big")),
    )
    public_key = signature.recover_public_key_from_msg_hash(message_hash(offer_id, result))
    return public_key.to_checksum_address()


class LocalAttestationSigner:
    """Signs attestations with a private key held in process memory.

    The key is parsed once at construction and never logged.
    """

    def __init__(self, private_key: str) -> None:
        try:
            self._account = Account.from_key(private_key)
        except Exception as exc:
            # Never include the key material in the message
            raise SigningError(f"invalid signer key: {type(exc).__name__}") from None

    @property
    def address(self) -> str:
        return self._account.address

    def sign(self, offer_id: int, result: bool) -> Attestation:
        digest = message_hash(offer_id, result)
        try:
            signed = self._account.unsafe_sign_hash(digest)
        except Exception as exc:
            log.error("Signing failed for offer %d: %s", offer_id, type(exc).__name__)
            raise SigningError(f"signing failed for offer {offer_id}") from exc

        log.info("Signed offer %d result=%s", offer_id, result)
        return Attestation(
            offer_id=offer_id,
            result=result,
            message_hash="0x" + digest.hex(),
            v=signed.v,
            r=_hex32(signed.r),
            s=_hex32(signed.s),
        )
