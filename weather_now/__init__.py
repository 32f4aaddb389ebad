# ABOUTME: Weather Now, a city weather lookup widget over the Open-Meteo APIs.
# ABOUTME: Exposes debounced autocomplete, keyboard selection, and resolve-then-fetch lookups.
