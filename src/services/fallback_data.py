"""Fixed data served when the remote catalog is unavailable."""

FALLBACK_PRODUCTS: list[dict] = [
    {
        "id": "fallback-1",
        "name": "LDU Quito Home Jersey 2025",
        "description": "The new home jersey.",
        "price": 59.99,
        "image_url": "https://i.imgur.com/ejkwi4m.png",
        "team": "LDU Quito",
    },
    {
        "id": "fallback-2",
        "name": "Barcelona SC Home Jersey 2025",
        "description": "The classic yellow home jersey.",
        "price": 59.99,
        "image_url": "https://i.imgur.com/O1n3f0W.png",
        "team": "Barcelona SC",
    },
]
