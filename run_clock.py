#!/usr/bin/env python3
"""
Zone Clock - Web Interface Entry Point

Run this script to start the web application:
    python3 run_clock.py

Then open your browser to: http://127.0.0.1:8080/time?timezone=UTC+3
"""

from clock_app import create_app
import os

app = create_app(os.getenv('FLASK_CONFIG', 'development'))

if __name__ == '__main__':
    # Get port from environment variable or use default
    port = int(os.getenv('PORT', 8080))

    print("\n" + "="*60)
    print("Zone Clock Web Interface")
    print("="*60)
    print(f"\nOpen browser to: http://127.0.0.1:{port}/time")
    print("\nPress CTRL+C to stop the server\n")

    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=port)
