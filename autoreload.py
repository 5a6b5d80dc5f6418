""" A simple autoreload script using watchdog.

Gradio's own reload mode does not pick up edits to the maze files or the strategies
package reliably, so this script reruns app.py whenever a .py or maze .txt file changes.
"""
import subprocess
import sys
import time
import os
from watchdog.observers import Observer
from watchdog.events import PatternMatchingEventHandler

import constants


class AppProcess:
    """Owns the running app.py child process."""

    def __init__(self, command=None):
        self.command = command or [sys.executable, 'app.py']
        self.process = None

    def start(self):
        self.stop()
        print("🚀 Starting app.py...")
        self.process = subprocess.Popen(self.command)

    def stop(self):
        if self.process is None:
            return
        print("\n🔄 Terminating previous process...")
        self.process.terminate()
        try:
            self.process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            print("⚠️  Process didn't terminate, forcing kill...")
            self.process.kill()
            self.process.wait()
        self.process = None


class ReloadHandler(PatternMatchingEventHandler):
    def __init__(self, on_change, debounce_s=constants.RELOAD_DEBOUNCE_S, clock=time.time):
        # Monitor source and maze files, except this script
        super().__init__(
            patterns=['*.py', '*.txt'],
            ignore_patterns=['*autoreload.py'],
            ignore_directories=True,
            case_sensitive=False
        )
        self.on_change = on_change
        self.debounce_s = debounce_s
        self.clock = clock
        self.last_modified = {}

    def should_reload(self, path):
        """Debounce: ignore rapid successive modifications of the same file."""
        now = self.clock()
        last = self.last_modified.get(path)
        if last is not None and now - last < self.debounce_s:
            return False
        self.last_modified[path] = now
        return True

    def on_modified(self, event):
        if not self.should_reload(event.src_path):
            return
        print(f"\n📝 Change detected in: {os.path.basename(event.src_path)}")
        self.on_change()


def main(path="."):
    app = AppProcess()
    app.start()

    # Setting up watchdog to monitor the project directory
    observer = Observer()
    observer.schedule(ReloadHandler(app.start), path=path, recursive=True)
    observer.start()

    try:
        print("\n👀 Watching for changes in .py and maze .txt files (excluding autoreload.py)...")
        print("Press Ctrl+C to stop\n")
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\n\n🛑 Shutting down...")
    finally:
        observer.stop()
        observer.join()
        app.stop()
    print("✅ Cleanup complete")


if __name__ == "__main__":
    main()
