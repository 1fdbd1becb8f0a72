DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8

# Length of every reported run. Longer lines are reported as overlapping runs of this size.
MATCH_LENGTH = 3

# Upper bound on match-finding passes per construction or move.
# A generator that keeps recreating runs would otherwise never let the board settle.
MAX_RESOLUTION_PASSES = 100
