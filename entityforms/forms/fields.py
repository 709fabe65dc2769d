from datetime import date, datetime, time, tzinfo
from decimal import Decimal, InvalidOperation

# -------- utilidades --------
NULL_TOKENS = {"nan", "none", "null"}

def _clean(x) -> str | None:
    """Texto recortado, o None si viene vacío o 'nan/none/null'."""
    if x is None:
        return None
    s = str(x).strip()
    if s == "" or s.lower() in NULL_TOKENS:
        return None
    return s

def is_blank(x) -> bool:
    return x is None or str(x).strip() == ""

def try_parse_int(x) -> int | None:
    """Convierte de forma segura a int; None si vacío/null/no convertible."""
    s = _clean(x)
    if s is None:
        return None
    try:
        return int(s)
    except ValueError:
        return None

def try_parse_decimal(x) -> Decimal | None:
    """Igual que try_parse_int pero a Decimal. NaN/Infinity cuentan como no convertibles."""
    s = _clean(x)
    if s is None:
        return None
    try:
        value = Decimal(s)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None

def is_unparseable(x, parsed) -> bool:
    """Hay texto real pero el parseo devolvió None."""
    return _clean(x) is not None and parsed is None

# -------- formato explícito (sin locale global) --------
def format_decimal(value: Decimal | float | None, places: int = 2) -> str:
    if value is None:
        return ""
    return f"{Decimal(str(value)):.{places}f}"

def to_local_midnight(d: date, tz: tzinfo | None = None) -> datetime:
    """Medianoche local de ``d`` como instante con zona. tz None = zona del sistema."""
    midnight = datetime.combine(d, time.min)
    if tz is None:
        return midnight.astimezone()
    return midnight.replace(tzinfo=tz)

def to_local_date(value: datetime | None, tz: tzinfo | None = None) -> date | None:
    if value is None:
        return None
    # las bases sin zona (sqlite) devuelven naive: se toma como hora local
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(tz).date()
