"""
gui
~~~
All Qt widgets plus the controller that drives them.

•  No HTTP here – everything goes through `store.MovieStoreClient`.
•  Re-export the high-level symbols so the app can simply:

    from movieStore.gui import MainWindow, MovieController
"""

from movieStore.gui.controller     import MovieController
from movieStore.gui.workers        import ThreadRunner
from movieStore.gui.main_window    import MainWindow
from movieStore.gui.add_movie_form import AddMovieForm
from movieStore.gui.movie_card     import MovieCard

__all__ = [
    "MovieController", "ThreadRunner",
    "MainWindow", "AddMovieForm", "MovieCard",
]
