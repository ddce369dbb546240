import os


def get_assets_dir(assets_dir=None):
    """Get the directory to load the scene's images from.

    An explicitly given directory wins. Otherwise ``SPACESCROLL_ASSETS_DIR``
    is used if set, and the current working directory as a last resort
    (images are looked up relative to where the scene is started from).
    """
    if assets_dir:
        return os.path.abspath(os.path.expanduser(str(assets_dir)))
    dir = os.getenv("SPACESCROLL_ASSETS_DIR")
    if dir:
        return os.path.abspath(os.path.expanduser(dir))
    return os.getcwd()
