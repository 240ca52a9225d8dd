# Bundled copy of the FSF license document (licenses-full.json),
# read with importlib.resources when no other source is available.
