"""Dental reference terminology: tooth numbering systems and abbreviations."""

_PERMANENT = (
    "Third molar",
    "Second molar",
    "First molar",
    "Second premolar",
    "First premolar",
    "Canine",
    "Lateral incisor",
    "Central incisor",
)
_PRIMARY = (
    "Second molar",
    "First molar",
    "Canine",
    "Lateral incisor",
    "Central incisor",
)
_QUADRANTS = ("upper right", "upper left", "lower left", "lower right")


def _universal_mapping():
    mapping = {}
    # Universal numbering runs 1-32 around the arch starting at the upper right third molar,
    # so every other quadrant reads the tooth sequence in reverse.
    number = 1
    for index, quadrant in enumerate(_QUADRANTS):
        names = _PERMANENT if index % 2 == 0 else tuple(reversed(_PERMANENT))
        for name in names:
            mapping[str(number)] = f"{name} ({quadrant})"
            number += 1
    letter = ord("A")
    for index, quadrant in enumerate(_QUADRANTS):
        names = _PRIMARY if index % 2 == 0 else tuple(reversed(_PRIMARY))
        for name in names:
            mapping[chr(letter)] = f"{name} ({quadrant} primary)"
            letter += 1
    return mapping


def _fdi_mapping():
    mapping = {}
    # FDI: first digit is the quadrant (1-4 permanent, 5-8 primary), second digit counts from the midline.
    for offset, quadrant in enumerate(_QUADRANTS):
        for position, name in enumerate(reversed(_PERMANENT), start=1):
            mapping[f"{offset + 1}{position}"] = f"{name} ({quadrant})"
        for position, name in enumerate(reversed(_PRIMARY), start=1):
            mapping[f"{offset + 5}{position}"] = f"{name} ({quadrant} primary)"
    return mapping


TOOTH_NUMBERING_SYSTEMS = {
    "universal": {
        "description": "Universal/National System (US)",
        "mapping": _universal_mapping(),
    },
    "fdi": {
        "description": "FDI/ISO System (International)",
        "mapping": _fdi_mapping(),
    },
}

ABBREVIATIONS = {
    "BW": "Bitewing radiograph",
    "PA": "Periapical radiograph",
    "FMX": "Full mouth x-rays",
    "PFM": "Porcelain fused to metal",
    "FPD": "Fixed partial denture",
    "RPD": "Removable partial denture",
    "RCT": "Root canal treatment",
    "SRP": "Scaling and root planing",
    "BOP": "Bleeding on probing",
    "BOE": "Buccal object evaluation",
    "CAL": "Clinical attachment level",
    "PD": "Probing depth",
    "OP": "Occlusal plane",
    "TMJ": "Temporomandibular joint",
    "TMD": "Temporomandibular disorder",
    "NSPT": "Non-surgical periodontal therapy",
    "MBL": "Marginal bone loss",
    "MIH": "Molar incisor hypomineralization",
    "MOD": "Mesial-occlusal-distal",
    "DO": "Distal-occlusal",
    "MO": "Mesial-occlusal",
    "CO": "Centric occlusion",
    "CR": "Centric relation",
    "WNL": "Within normal limits",
    "CBCT": "Cone beam computed tomography",
    "POE": "Periodic oral evaluation",
    "CEJ": "Cemento-enamel junction",
}
