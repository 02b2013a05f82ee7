# Oldest year accepted by the movie form
MIN_MOVIE_YEAR = 1900

# Session bag key holding the active user's id
SESSION_USER_ID_KEY = "id"
