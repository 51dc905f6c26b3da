# Upstream timeouts (seconds)
SEARCH_TIMEOUT = 5
OBJECT_TIMEOUT = 3
# Socket-level ceiling handed to requests, so abandoned calls release their thread
REQUEST_TIMEOUT = 10

# How many object IDs of the seed search are examined for artist names
ARTIST_CANDIDATE_CAP = 40
MAX_ARTISTS = 50

# How many object IDs of an artist search are walked to collect works
WORK_ID_CAP = 50
DEFAULT_WORKS_LIMIT = 10
MAX_WORKS_LIMIT = 10
GALLERY_WORKS_LIMIT = 6

PUBLIC_SAMPLE_QUERY = "*"
PUBLIC_SAMPLE_SIZE = 10

# Shared worker pool for fan-out and deadline racing
MAX_FETCH_WORKERS = 48

UNTITLED = "Untitled"
UNKNOWN_ARTIST = "Unknown artist"
UNKNOWN_DATE = "Unknown date"
