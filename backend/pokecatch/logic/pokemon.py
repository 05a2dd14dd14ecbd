"""Pokemon construction."""

from pokecatch.logic.exceptions import InvalidPokemonError
from pokecatch.logic.state import Pokemon


def create_pokemon(name: str | None, location: str | None) -> Pokemon:
    """Create a Pokemon; name and location must both be non-empty after trimming."""
    clean_name = (name or "").strip()
    clean_location = (location or "").strip()
    if not clean_name or not clean_location:
        raise InvalidPokemonError("Pokemon name and location cannot be empty")
    return Pokemon(name=clean_name, location=clean_location)
