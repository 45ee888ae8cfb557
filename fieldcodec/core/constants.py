"""Core constants: wire-shape keys and shadow field naming.

Single source of truth for the tagged wire shape. Used by both converter
layers and the registry.
"""

# Prefix of the companion field that carries type metadata ("#field").
SHADOW_PREFIX = "#"

# Keys common to every wire shape
TYPE_KEY = "@type"
SOURCE_KEY = "@source"
TARGET_KEY = "@target"

# Type-specific keys
VALUE_KEY = "@value"
INCREMENT_KEY = "@increment"
TIME_KEY = "@time"
NOW_KEY = "@now"
START_KEY = "@start"
END_KEY = "@end"
LANGUAGE_KEY = "@language"
COUNTRY_KEY = "@country"
LOCALIZED_KEY = "@localized"
URI_KEY = "@uri"
LATITUDE_KEY = "@latitude"
LONGITUDE_KEY = "@longitude"
GEOHASH_KEY = "@geoHash"
REF_KEY = "@ref"
DOC_KEY = "@doc"
VECTOR_KEY = "@vector"
LIST_KEY = "@list"
COMMAND_KEY = "@command"
PUBLIC_KEY = "@public"
PRIVATE_KEY = "@private"

# Delimiters of the scalar string forms
LOCALE_SEP = "_"
RANGE_SEP = "|"
LOCALIZED_ENTRY_SEP = ":"
