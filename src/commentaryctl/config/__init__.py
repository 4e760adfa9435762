from .loader import CONFIG_FILENAME, CommentaryConfig, config_file_for, load_config, save_target

__all__ = ["CONFIG_FILENAME", "CommentaryConfig", "config_file_for", "load_config", "save_target"]
