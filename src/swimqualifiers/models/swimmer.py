"""Competition sex categories."""

from enum import StrEnum


class Sex(StrEnum):
    """Sex category used by meet results and time standards."""

    MEN = "Men"
    WOMEN = "Women"

    @classmethod
    def parse(cls, value: str) -> "Sex":
        """Parse the spellings used in meet exports and standards sheets.

        Examples:
            "M", "Men", "Mens", "Male", "boys" -> Sex.MEN
            "F", "W", "Women", "Womens", "Female", "girls" -> Sex.WOMEN

        Raises:
            ValueError: If the value is blank or not a known spelling
        """
        key = value.strip().lower().replace("'", "")
        if key not in SEX_ALIASES:
            raise ValueError(f"Invalid sex: '{value}'. Expected one of: Men, Women")
        return SEX_ALIASES[key]


SEX_ALIASES: dict[str, Sex] = {
    # Men
    "m": Sex.MEN,
    "men": Sex.MEN,
    "mens": Sex.MEN,
    "male": Sex.MEN,
    "boys": Sex.MEN,
    # Women
    "f": Sex.WOMEN,
    "w": Sex.WOMEN,
    "women": Sex.WOMEN,
    "womens": Sex.WOMEN,
    "female": Sex.WOMEN,
    "girls": Sex.WOMEN,
}
