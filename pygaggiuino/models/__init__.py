"""Models for the Gaggiuino API."""

from ._profile import Phase, PhaseTarget, Profile, ProfileRecipe, StopConditions
from ._shot import LatestShot, Shot, ShotDatapoints
from ._status import MachineStatus

__all__ = [
    "LatestShot",
    "MachineStatus",
    "Phase",
    "PhaseTarget",
    "Profile",
    "ProfileRecipe",
    "Shot",
    "ShotDatapoints",
    "StopConditions",
]
