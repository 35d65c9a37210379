"""Constants for ical_light parsing library."""

# Related to rfc5545 text parsing
LINES = r"\r?\n"
WSP = (" ", "\t")
ATTR_BEGIN = "BEGIN"
