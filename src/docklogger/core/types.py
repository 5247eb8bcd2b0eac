"""Type aliases used across DockLogger."""

from __future__ import annotations

from datetime import date

# A calendar date, or its ISO ``YYYY-MM-DD`` text form.
DateLike = date | str
