def format_elapsed(seconds: float) -> str:
    """Render a duration as ``HH:MM:SS`` (fractions dropped, negatives clamp to zero)."""
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
