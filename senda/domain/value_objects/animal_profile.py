from __future__ import annotations

from enum import Enum


class Purpose(str, Enum):
    FATTENING = "fattening"
    BREEDING = "breeding"
    SALE = "sale"


class Category(str, Enum):
    VACA = "vaca"
    VAQUILLA = "vaquilla"
    NOVILLO = "novillo"
    TORO = "toro"
    DESMAMANTE_MACHO = "desmamante_macho"
    DESMAMANTE_HEMBRA = "desmamante_hembra"
    TERNERO = "ternero"
    BUEYE = "bueye"
