"""
Constants Module

Fixed tables shared by the AForm components:
- Alert message strings shown by the host application
- Preset date and time format tables (indexed by the legacy API)
- Preset character masks for zip codes, phone numbers and SSNs
- Text colors used for negative-number styling
"""


class GlobalConstants:
    """Message strings used in user-facing alerts."""
    IDS_GREATER_THAN = "Invalid value: must be greater than or equal to % s."
    IDS_GT_AND_LT = (
        "Invalid value: must be greater than or equal to % s "
        "and less than or equal to % s."
    )
    IDS_LESS_THAN = "Invalid value: must be less than or equal to % s."
    IDS_INVALID_MONTH = "** Invalid **"
    IDS_INVALID_DATE = (
        "Invalid date/time: please ensure that the date/time exists. Field"
    )
    IDS_INVALID_DATE2 = " should match format "
    IDS_INVALID_VALUE = "The value entered does not match the format of the field"
    IDS_AM = "am"
    IDS_PM = "pm"

    @classmethod
    def as_dict(cls) -> dict[str, str]:
        """Return all message constants keyed by name."""
        return {
            name: value
            for name, value in vars(cls).items()
            if name.startswith('IDS_')
        }


class Color:
    """Color values assignable to a field's ``text_color``."""
    BLACK = ("G", 0)
    RED = ("RGB", 1, 0, 0)


DATE_FORMATS = [
    "m/d",
    "m/d/yy",
    "mm/dd/yy",
    "mm/yy",
    "d-mmm",
    "d-mmm-yy",
    "dd-mmm-yy",
    "yy-mm-dd",
    "mmm-yy",
    "mmmm-yy",
    "mmm d, yyyy",
    "mmmm d, yyyy",
    "m/d/yy h:MM tt",
    "m/d/yy HH:MM",
]

TIME_FORMATS = [
    "HH:MM",
    "h:MM tt",
    "HH:MM:ss",
    "h:MM:ss tt",
]

# Preset masks indexed by the psf argument
ZIP_MASK = "99999"
ZIP_PLUS_FOUR_MASK = "99999-9999"
PHONE_MASK = "999-9999"
PHONE_WITH_AREA_MASK = "(999) 999-9999"
SSN_MASK = "999-99-9999"

SPECIAL_MASKS = {
    0: ZIP_MASK,
    1: ZIP_PLUS_FOUR_MASK,
    2: PHONE_MASK,
    3: SSN_MASK,
}

# Largest digit count accepted by percent formatting before it gives up
MAX_PERCENT_DECIMALS = 512

# https://html.spec.whatwg.org/multipage/input.html#valid-e-mail-address
EMAIL_PATTERN = (
    r"^[a-zA-Z0-9.!#$%&'*+\/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

DAY_NAMES = [
    "Sunday", "Monday", "Tuesday", "Wednesday",
    "Thursday", "Friday", "Saturday",
]
