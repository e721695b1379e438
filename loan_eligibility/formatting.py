"""
Number formatting helpers for eligibility text.
Rupee amounts use Indian digit grouping (2,00,000) like en-IN locales.
"""


def format_inr(amount: float) -> str:
    """
    Group digits the en-IN way: last three digits, then pairs.
    Keeps up to 3 fraction digits and drops trailing zeros.
    """
    sign = "-" if amount < 0 else ""
    text = f"{abs(float(amount)):.3f}"
    whole, frac = text.split(".")
    frac = frac.rstrip("0")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        whole = ",".join(pairs) + "," + tail

    if sign and whole == "0" and not frac:
        sign = ""
    return f"{sign}{whole}.{frac}" if frac else f"{sign}{whole}"


def format_count(value) -> str:
    """Integral floats render without a trailing .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
