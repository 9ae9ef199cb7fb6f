from enum import Enum


class CurveGroup(Enum):
    G1 = "G1"
    G2 = "G2"
