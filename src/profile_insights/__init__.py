"""Profile Insights.

Analytics core for a content platform's user profile page:
popularity ranking of a user's projects and a merged
activity timeline.
"""

__version__ = "0.1.0"
