"""
Entry Point Script (Bootstrap)
==============================
Runs the application from a source checkout without installing it.

It modifies 'sys.path' so Python can resolve imports like
'from raytracer.algebra...' from the 'src' directory.

Usage:
    $ python run.py --speed 2.0
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from raytracer.main import main

if __name__ == "__main__":
    sys.exit(main())
