__title__ = "exitsignal"
__description__ = "Graceful process exit from any call depth, with cleanup still running."
__version__ = "1.0.0"
__license__ = "GPLv3"
