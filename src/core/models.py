"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and db layer (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass


@dataclass
class SessionModel:
    """Transport-safe representation of a game session used between API, Service, and DB layers.

    The game itself is stored as the list of moves played (coordinate notation: 'e2e4'). The Service rebuilds the
    state by replaying them, so the board never needs its own storage format.
    """

    mode: str
    difficulty: str
    player_color: str
    moves: list[str]
    status: str
