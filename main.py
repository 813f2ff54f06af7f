#!/usr/bin/env python3
"""
Pixel Engine - render HTML and CSS to an image.

Launcher for running the renderer from a source checkout.
"""

import os
import sys

# Add the engine to the path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from pixel_engine.main import main

if __name__ == "__main__":
    sys.exit(main())
