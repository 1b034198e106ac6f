no_cache_headers = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': '*',
    'Cache-Control': 'no-cache, no-store, must-revalidate',
    'Pragma': 'no-cache',
    'Expires': '0',
}

# Language separators used by the two label consumers
LABEL_SEPARATOR_BUTTON = ', '
LABEL_SEPARATOR_COMPACT = '+'
LABEL_SEPARATORS = (LABEL_SEPARATOR_BUTTON, LABEL_SEPARATOR_COMPACT)

tmdb_search_paths = {
    'movie': '/search/movie',
    'tv': '/search/tv',
}
