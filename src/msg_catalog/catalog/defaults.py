"""Sample messages loaded into a fresh catalog."""

from __future__ import annotations

import logging

from ..core.models import File, Priority, ReactionType
from .catalog import MessageCatalog

LOGGER = logging.getLogger(__name__)


def seed_default_messages(catalog: MessageCatalog) -> int:
    """Add the sample board postings, emails and reactions to ``catalog``.

    Returns the number of catalog entries added.
    """
    before = len(catalog)

    catalog.add(catalog.build_board("Alice", "Meeting at 10 AM", Priority.URGENT))
    catalog.add(
        catalog.build_board(
            "Bob", "Weekly report submission deadline", Priority.REGULAR
        )
    )
    party_reactions = [
        catalog.build_reaction("Shay", "Love this idea!", ReactionType.LOVE),
        catalog.build_reaction("Frank", "Interesting perspective.", ReactionType.LAUGH),
    ]
    catalog.add(
        catalog.build_board(
            "Lili", "Birthday party on Sunday.", Priority.SPECIAL, party_reactions
        )
    )

    catalog.add(
        catalog.build_email(
            "Shany",
            "Here are the documents for review.",
            "Documents Review",
            [File("Document1", "pdf"), File("Presentation1", "ppt")],
        )
    )
    catalog.add(
        catalog.build_email(
            "Sam",
            "Check out this amazing picture!",
            "Amazing Picture",
            [File("Image1", "jpg")],
        )
    )

    catalog.add(catalog.build_reaction("Lili", "Love this idea!", ReactionType.LOVE))
    catalog.add(
        catalog.build_reaction("Yoni", "Interesting perspective.", ReactionType.LAUGH)
    )

    added = len(catalog) - before
    LOGGER.debug("Seeded catalog with %d default message(s)", added)
    return added


__all__ = ["seed_default_messages"]
