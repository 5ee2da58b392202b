"""WebDriver key codes for ``send_keys``."""

# WebDriver key codes live in the Unicode private use area.
_BASE = 0xE000


class Keys:
    NULL = chr(_BASE)
    CANCEL = chr(_BASE + 0x01)
    HELP = chr(_BASE + 0x02)
    BACK_SPACE = chr(_BASE + 0x03)
    TAB = chr(_BASE + 0x04)
    CLEAR = chr(_BASE + 0x05)
    RETURN = chr(_BASE + 0x06)
    ENTER = chr(_BASE + 0x07)
    SHIFT = chr(_BASE + 0x08)
    CONTROL = chr(_BASE + 0x09)
    ALT = chr(_BASE + 0x0A)
    PAUSE = chr(_BASE + 0x0B)
    ESCAPE = chr(_BASE + 0x0C)
    SPACE = chr(_BASE + 0x0D)
    PAGE_UP = chr(_BASE + 0x0E)
    PAGE_DOWN = chr(_BASE + 0x0F)
    END = chr(_BASE + 0x10)
    HOME = chr(_BASE + 0x11)
    LEFT = chr(_BASE + 0x12)
    UP = chr(_BASE + 0x13)
    RIGHT = chr(_BASE + 0x14)
    DOWN = chr(_BASE + 0x15)
    INSERT = chr(_BASE + 0x16)
    DELETE = chr(_BASE + 0x17)
    SEMICOLON = chr(_BASE + 0x18)
    EQUALS = chr(_BASE + 0x19)
    F1 = chr(_BASE + 0x31)
    F2 = chr(_BASE + 0x32)
    F3 = chr(_BASE + 0x33)
    F4 = chr(_BASE + 0x34)
    F5 = chr(_BASE + 0x35)
    F6 = chr(_BASE + 0x36)
    F7 = chr(_BASE + 0x37)
    F8 = chr(_BASE + 0x38)
    F9 = chr(_BASE + 0x39)
    F10 = chr(_BASE + 0x3A)
    F11 = chr(_BASE + 0x3B)
    F12 = chr(_BASE + 0x3C)
    META = chr(_BASE + 0x3D)
    COMMAND = META
