# qif_dom/controllers/__init__.py
from .qif_loader import dumps, load, load_path, loads, save, save_path

__all__ = ["load", "loads", "load_path", "save", "dumps", "save_path"]
