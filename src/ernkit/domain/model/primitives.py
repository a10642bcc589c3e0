"""Domain primitives: scalar aliases shared by the model and the builders."""

from __future__ import annotations

type Upc = str
type Isrc = str
type Grid = str
type TerritoryCode = str
type DurationSeconds = float
type PartyReference = str
type ResourceReference = str
type ReleaseReference = str

HASH_PENDING = "PENDING"
HASH_FAILED = "MD5_CALCULATION_FAILED"
WORLDWIDE = "Worldwide"
