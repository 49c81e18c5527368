# ----------------------------- Toroid cores -----------------------------
# Ferrite toroid sizes, dimensions in mm (outer diameter, inner diameter, height).

CORE_SIZES = {
    "FT-23": {
        "od_mm": 5.84,
        "id_mm": 3.05,
        "ht_mm": 1.52,
    },
    "FT-37": {
        "od_mm": 9.53,
        "id_mm": 4.75,
        "ht_mm": 3.18,
    },
    "FT-50": {
        "od_mm": 12.7,
        "id_mm": 7.14,
        "ht_mm": 4.78,
    },
    "FT-82": {
        "od_mm": 20.96,
        "id_mm": 13.21,
        "ht_mm": 6.35,
    },
    "FT-114": {
        "od_mm": 29.0,
        "id_mm": 19.0,
        "ht_mm": 7.49,
    },
    "FT-140": {
        "od_mm": 35.55,
        "id_mm": 22.86,
        "ht_mm": 12.7,
    },
    "FT-240": {
        "od_mm": 61.0,
        "id_mm": 35.55,
        "ht_mm": 12.7,
    },
}

DEFAULT_CORE = "FT-240"
