# sur_scraper/debug.py
from . import config

def dbg(*args):
    if config.DEBUG:
        print("[DEBUG]", *args, flush=True)
