APP_ORG = "docio"
APP_NAME = "docio"

SETTINGS_RECENTS = "RecentlyOpenedFiles"
RECENTS_SEPARATOR = ";"
MAX_RECENTS = 10

TEXT_FILTER = "Text (*.txt *.md);;All files (*)"
