DOMAIN = "luach_board"

# Folder under <config>/www that holds the board's editable data files
DATA_FOLDER = "www/luach-board"
MEMORIALS_FILE = "memorials.json"
ANNOUNCEMENTS_FILE = "announcements.json"
CLASSES_FILE = "classes.json"
