# Global Config

# Sent to a member when the expiration sweep deactivates them.
# Available fields: {name}, {end_date}
EXPIRY_NOTICE = "Hi {name}, your subscription ended on {end_date}. Renew to restore access."

# Format used when rendering dates inside notification messages
DATE_FORMAT = "%Y-%m-%d"
