"""Muscle name to body-diagram region mapping.

Region keys follow the anatomical body-highlighter convention used by the
front/back muscle map renderers. Lookup is case-insensitive.
"""

MUSCLE_REGION_MAP: dict[str, tuple[str, ...]] = {
    # Chest
    "Chest": ("chest",),
    "Upper Chest": ("chest",),
    "Middle Chest": ("chest",),
    "Lower Chest": ("chest",),
    "Pectorals": ("chest",),
    "Pecs": ("chest",),
    # Back
    "Lats": ("upper-back",),
    "Latissimus Dorsi": ("upper-back",),
    "Upper Back": ("upper-back",),
    "Rhomboids": ("upper-back",),
    "Lower Back": ("lower-back",),
    "Erector Spinae": ("lower-back",),
    "Back": ("upper-back", "lower-back"),
    # Shoulders
    "Front Delts": ("front-deltoids",),
    "Front Deltoids": ("front-deltoids",),
    "Side Delts": ("back-deltoids",),
    "Side Deltoids": ("back-deltoids",),
    "Lateral Delts": ("back-deltoids",),
    "Rear Delts": ("back-deltoids",),
    "Rear Deltoids": ("back-deltoids",),
    "Deltoids": ("front-deltoids", "back-deltoids"),
    "Shoulders": ("front-deltoids", "back-deltoids"),
    # Arms
    "Biceps": ("biceps",),
    "Triceps": ("triceps",),
    "Forearms": ("forearm",),
    "Forearm": ("forearm",),
    "Brachialis": ("biceps",),
    # Legs
    "Quads": ("quadriceps",),
    "Quadriceps": ("quadriceps",),
    "Hamstrings": ("hamstring",),
    "Glutes": ("gluteal",),
    "Gluteus": ("gluteal",),
    "Calves": ("calves",),
    "Legs": ("quadriceps", "hamstring", "calves"),
    "Hip Flexors": ("quadriceps",),
    "Hip Abductors": ("gluteal",),
    # Core
    "Abs": ("abs",),
    "Abdominals": ("abs",),
    "Upper Abdominals": ("abs",),
    "Middle Abdominals": ("abs",),
    "Lower Abdominals": ("abs",),
    "Obliques": ("obliques",),
    "Core": ("abs", "obliques"),
    "Serratus Anterior": ("abs",),
    # Traps
    "Traps": ("trapezius",),
    "Traps (Upper)": ("trapezius",),
    "Trapezius": ("trapezius",),
}

_REGIONS_BY_KEY = {name.casefold(): regions for name, regions in MUSCLE_REGION_MAP.items()}


def regions_for_muscle(muscle: str) -> tuple[str, ...]:
    return _REGIONS_BY_KEY.get(muscle.strip().casefold(), ())
