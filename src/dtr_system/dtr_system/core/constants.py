"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Acceptance windows used when a checkpoint has an expected time but no window.
FALLBACK_AM_CHECKIN_WINDOW = ("04:00", "11:59")
FALLBACK_AM_CHECKOUT_WINDOW = ("11:00", "12:30")
FALLBACK_PM_CHECKIN_WINDOW = ("12:31", "14:00")
FALLBACK_PM_CHECKOUT_WINDOW = ("14:01", "23:59")

MINUTES_PER_WORKDAY = 8 * 60
NET_DAYS_PRECISION = 4
RESPONSE_DAYS_PRECISION = 2

SHIFT_NAME_SEPARATOR = " / "

FIRST_HALF_LAST_DAY = 15

COMPUTED_DTR_DEFAULT_STATUS = "For Approval"
COMPUTED_DTR_LOCKED_STATUSES = ("For Approval", "Approved")
