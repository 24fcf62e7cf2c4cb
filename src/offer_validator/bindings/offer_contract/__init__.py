"""Offers contract bindings.

Only the ``offers(uint256)`` view is needed. The getter returns the struct
positionally; ``OFFER_FIELDS`` names the slots the validator reads.
"""

OFFERS_ABI = [
    {
        "type": "function",
        "name": "offers",
        "stateMutability": "view",
        "inputs": [{"name": "", "type": "uint256"}],
        "outputs": [
            {"name": "id", "type": "uint256"},
            {"name": "sender", "type": "address"},
            {"name": "receiver", "type": "address"},
            {"name": "token", "type": "address"},
            {"name": "amount", "type": "uint256"},
            {"name": "acceptedAt", "type": "uint256"},
            {"name": "duration", "type": "uint256"},
            {"name": "castUrl", "type": "string"},
            {"name": "reactionType", "type": "uint8"},
            {"name": "state", "type": "uint8"},
        ],
    },
]

# Positions in the tuple returned by offers(uint256)
OFFER_FIELDS = {
    "receiver": 2,
    "accepted_at": 5,
    "duration": 6,
    "cast_url": 7,
    "reaction_type": 8,
    "state": 9,
}

__all__ = ["OFFERS_ABI", "OFFER_FIELDS"]
