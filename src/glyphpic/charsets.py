# Braille patterns: U+2800 to U+28FF, indexed directly by the 8-bit dot mask
BRAILLE = "".join(chr(i) for i in range(0x2800, 0x2900))

# Quadrant blocks indexed by mask, bit order TL=1, TR=2, BL=4, BR=8
QUADRANTS = " ▘▝▀▖▌▞▛▗▚▐▜▄▙▟█"

LEFT_HALF_BLOCK = "▌"
RIGHT_HALF_BLOCK = "▐"
FULL_BLOCK = "█"


def _build_sextants() -> str:
    # Symbols for Legacy Computing (U+1FB00-U+1FB3B) skip the four patterns that
    # already exist as block elements: empty, both left cells, both right cells, full.
    table = []
    code = 0x1FB00
    for mask in range(64):
        if mask == 0:
            table.append(" ")
        elif mask == 21:
            table.append(LEFT_HALF_BLOCK)
        elif mask == 42:
            table.append(RIGHT_HALF_BLOCK)
        elif mask == 63:
            table.append(FULL_BLOCK)
        else:
            table.append(chr(code))
            code += 1
    return "".join(table)


# Sextants indexed by mask, bit order TL=1, TR=2, ML=4, MR=8, BL=16, BR=32
SEXTANTS = _build_sextants()
