# ID3v1 record layout (offsets relative to the start of the 128-byte window)
# Spec: http://id3.org/ID3v1
RECORD_SIZE = 128

SIGNATURE = "TAG"
SIGNATURE_LENGTH = 3

# (field, offset, length) of every text field in the window
TEXT_FIELDS = [
    ("title", 3, 30),
    ("artist", 33, 30),
    ("album", 63, 30),
    ("year", 93, 4),
    ("comment", 97, 28),
]

# ID3v1.1: byte 125 is a zero separator and byte 126 the track number
ZERO_BYTE_OFFSET = 125
TRACK_OFFSET = 126
GENRE_OFFSET = 127

# Order in which decoded fields are handed to the collector; genre comes last
TAG_ORDER = ["title", "artist", "album", "comment", "track", "year"]

# Tag type used for everything emitted from the ID3v1 record
TAG_TYPE = "ID3v1"

# APEv2 footer (32 bytes, little-endian)
# preamble, version, size (items + footer), item count, flags, reserved
APE_PREAMBLE = b"APETAGEX"
APE_FOOTER_SIZE = 32
APE_FLAG_HAS_HEADER = 1 << 31
APE_TAG_TYPE = "APEv2"

ENCODING = "latin-1"
