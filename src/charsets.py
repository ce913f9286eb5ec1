"""Predefined glyph ramps for ASCII frame conversion.

Each ramp lists its glyphs from the one used for black (brightness 0) to the
one used for white (brightness 255).
"""

CHAR_SETS = {
    'classic': {
        'chars': "@%#*+=-:. ",
        'name': 'Classic ASCII'
    },
    'standard': {
        'chars': " .:-=+*#%@",
        'name': 'Standard ASCII'
    },
    'standard2': {
        'chars': " ?=#&0%@",
        'name': 'Standard2 ASCII'
    },
    'standard5': {
        'chars': " `-~+#@",
        'name': 'Standard5 ASCII'
    },
    'standard7': {
        'chars': " `.,-:~;+*#%$@",
        'name': 'Standard7 ASCII'
    },
    'standard_alt': {
        'chars': " .,:ilwW",
        'name': 'Standard ASCII Alternative'
    },
    'fine': {
        'chars': " `^\",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$",
        'name': 'Fine Detail ASCII'
    },
    'blocks': {
        'chars': " ▏▎▍▌▋▊▉█",
        'name': 'Block Elements'
    },
    'shades': {
        'chars': " ░▒▓█",
        'name': 'Shaded Blocks'
    },
    'shades_mix': {
        'chars': " .░▒▓█",
        'name': 'Mixed Shaded Blocks'
    },
}

DEFAULT_CHAR_SET = 'classic'


def get_char_set(name):
    return CHAR_SETS[name]
