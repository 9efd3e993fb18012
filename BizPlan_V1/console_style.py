# bizplan/console_style.py
ANSI_CODES = {
    "bold": "1",
    "red": "91",
    "green": "92",
    "yellow": "93",
    "cyan": "96",
}


def style(text: str, *styles: str) -> str:
    codes = ";".join(ANSI_CODES[s] for s in styles)
    return f"\033[{codes}m{text}\033[0m"


def by_sign(value: float, text: str) -> str:
    """Vert si la valeur est positive ou nulle, rouge sinon."""
    return style(text, "green" if value >= 0 else "red")
