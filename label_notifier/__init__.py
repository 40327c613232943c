"""Label Notifier.

Polls a GitHub repository for open issues carrying any of a set of target
labels, reports the ones that appeared since the previous run through an
ntfy.sh push message, and stores the matching set for the next comparison.
"""

__version__ = "1.0.0"
