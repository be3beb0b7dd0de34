#!/usr/bin/env python3
"""
Hot-Zone Detection Engine - Entry Point
Start the Flask server.
"""

import os
import sys

# Ensure project root is in path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import HOST, PORT, DEBUG, MIN_SPINS_FOR_ANALYSIS, ANALYSIS_WINDOW

from hotzone import create_app

app = create_app()

if __name__ == '__main__':
    print("=" * 60)
    print("  Hot-Zone Detection Engine v1.0")
    print("=" * 60)
    print(f"  Server:    http://localhost:{PORT}")
    print(f"  Window:    {ANALYSIS_WINDOW} spins (min {MIN_SPINS_FOR_ANALYSIS})")
    print(f"  Debug:     {DEBUG}")
    print("=" * 60)
    print()

    app.run(host=HOST, port=PORT, debug=DEBUG, use_reloader=False)
