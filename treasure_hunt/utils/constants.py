"""Board file format constants and default paths."""

# Record kinds (first field of each board file line)
KIND_MAP = "C"
KIND_MOUNTAIN = "M"
KIND_TREASURE = "T"
KIND_ADVENTURER = "A"

# Field separator on input; whitespace around it is ignored
FIELD_SEPARATOR = "-"

# Field separator written to result files
OUTPUT_SEPARATOR = " - "

# Number of fields per record kind, kind included
RECORD_FIELDS = {
    KIND_MAP: 3,  # C - rows - cols
    KIND_MOUNTAIN: 3,  # M - row - col
    KIND_TREASURE: 4,  # T - row - col - count
    KIND_ADVENTURER: 6,  # A - name - row - col - orientation - commands
}

# Default locations used by the command line
DEFAULT_INPUT_PATH = "files/exercise.txt"
DEFAULT_OUTPUT_PATH = "files/result.txt"
