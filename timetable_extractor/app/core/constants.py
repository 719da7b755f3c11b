PDF_MEDIA_TYPE = "application/pdf"

# Title detection
PAGE_TOP_THRESHOLD = 750.0
TITLE_HEIGHT_THRESHOLD = 15.0

# Axis detection
ANCHOR_DAY = "sunday"
ROW_TOLERANCE = 5.0
DAY_MIN_LENGTH = 3
PERIOD_MARGIN = 100.0

# Grid / cells
OPEN_RIGHT_BOUND = 1000.0
SPLIT_GAP = 15.0
GROUP_TOKEN = "group"

TEACHER_SEPARATOR = " - "
MISSING_TEACHER = "N/A"

DISPLAY_HEADERS = {
    "classe": "Classe",
    "jour": "Jour",
    "horaire": "Horaire",
    "periode": "Période",
    "matiere": "Matière",
    "enseignant": "Enseignant",
}
