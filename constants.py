"""
Application constants for the Slack draft webhook

Static values only; runtime settings live in config.py.
"""
from types import MappingProxyType

# Slack request signing
SLACK_SIGNATURE_HEADER = "X-Slack-Signature"
SLACK_TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SLACK_SIGNATURE_VERSION = "v0"

# Slack payload types
URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"

# Value written to every drafted mark
DRAFT_SOURCE = "slack"

# League franchise names to abbreviations.
# Curacao Blue Wave was renamed Sao Paulo Black Mambas; both keep SPA.
TEAM_ABBREVIATIONS = MappingProxyType({
    'Adelaide Bite': 'ADE',
    'Amsterdam Dragons': 'AMS',
    'California Surfers': 'CAL',
    'Cleveland Spiders': 'CLE',
    'Curacao Blue Wave': 'SPA',
    'Denver Blucifers': 'DEN',
    'Dubai Bedouins': 'DUB',
    'Galapagos Shellbacks': 'GAL',
    'Havana Sugar Kings': 'HAV',
    'Honolulu Honu': 'HON',
    'Lappland Boazu': 'LAP',
    'London Red Coats': 'LDN',
    'Longbow Hunters': 'LON',
    'North Korea Outlaws': 'NKO',
    'Rome Centurions': 'RME',
    'Sao Paulo Black Mambas': 'SPA',
    'Sint Maarten Sun Chasers': 'SMT',
    'St. Lucia Mermen': 'STU',
    'Tokyo Tigers': 'TOK',
    'Toronto Huskies': 'TOR',
    'Vancouver Homewreckers': 'VAN',
})
