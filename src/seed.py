"""Example data loaded on first boot."""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from src.models.product import Product
from src.models.team import Team

logger = logging.getLogger(__name__)

SEED_TEAMS = [
    {
        "name": "LDU Quito",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/2/2e/LDU_Quito_logo_2023.svg",
    },
    {
        "name": "Barcelona SC",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/6/65/Escudo_de_Barcelona_Sporting_Club.svg",
    },
]

SEED_PRODUCTS = [
    {
        "name": "LDU Quito Home Jersey 2025",
        "description": "The new home jersey.",
        "price": Decimal("59.99"),
        "image_url": "https://i.imgur.com/ejkwi4m.png",
        "team": "LDU Quito",
    },
    {
        "name": "Barcelona SC Home Jersey 2025",
        "description": "The classic yellow home jersey.",
        "price": Decimal("59.99"),
        "image_url": "https://i.imgur.com/O1n3f0W.png",
        "team": "Barcelona SC",
    },
]


def seed_reference_data(db: Session) -> bool:
    """Load the example teams and jerseys if the store is empty.

    Returns True when data was inserted.
    """
    if db.query(Team).count() > 0:
        logger.info("Store already has example data")
        return False

    teams = {data["name"]: Team(**data) for data in SEED_TEAMS}
    db.add_all(teams.values())
    db.flush()

    for data in SEED_PRODUCTS:
        product = {key: value for key, value in data.items() if key != "team"}
        db.add(Product(**product, team_id=teams[data["team"]].id))

    db.commit()
    logger.info(f"Loaded {len(SEED_TEAMS)} teams and {len(SEED_PRODUCTS)} products")
    return True
