from asciiramp.errors import InvalidInput

# Ramps run dark to bright; index 0 is what an unlit cell becomes.
STANDARD = " .:-=+*#%@"

# Extended 70-character ramp
DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Shade blocks: U+2591-U+2593 plus full block U+2588
BLOCKS = " ░▒▓█"

MINIMAL = " .:#"

PRESETS = {
    "standard": STANDARD,
    "detailed": DETAILED,
    "blocks": BLOCKS,
    "minimal": MINIMAL,
}

DEFAULT_PRESET = "standard"


def get_ramp(name: str) -> str:
    """Look up a preset ramp by name."""
    try:
        return PRESETS[name]
    except KeyError:
        raise InvalidInput(f"Unknown charset: {name!r} (choose from {', '.join(PRESETS)})") from None


def validate_ramp(ramp: str) -> str:
    if not isinstance(ramp, str):
        raise InvalidInput(f"Ramp must be a string, got {type(ramp).__name__}")
    if len(ramp) < 2:
        raise InvalidInput(f"Ramp needs at least 2 characters, got {len(ramp)}")
    return ramp
