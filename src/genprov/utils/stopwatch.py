"""Timing utilities used to profile each stage of the processing chain."""

import time
from dataclasses import dataclass


@dataclass
class Time:
    """Simple dataclass to hold time information.

    Attributes
    ----------
    wall : float, optional
         Wall time
    cpu : float, optional
         CPU time
    """

    wall: float = None
    cpu: float = None

    def __add__(self, other):
        return Time(wall=self.wall + other.wall, cpu=self.cpu + other.cpu)

    def __sub__(self, other):
        return Time(wall=self.wall - other.wall, cpu=self.cpu - other.cpu)

    @classmethod
    def current(cls):
        """Returns the current time (wall and cpu).

        Returns
        -------
        Time
           Current time
        """
        return cls(time.time(), time.process_time())


class Stopwatch:
    """Holds timing information for a specific process."""

    def __init__(self):
        """Give default values to the underlying class attributes."""
        self._start = None
        self._time = None
        self._total = Time(0.0, 0.0)

    @property
    def running(self):
        """Whether the stopwatch is currently running."""
        return self._start is not None

    def start(self):
        """Starts the stopwatch."""
        if self.running:
            raise ValueError("Cannot restart a watch that has not been stopped.")

        self._start = Time.current()

    def stop(self):
        """Stops the stopwatch, records the time elapsed since the start."""
        if not self.running:
            raise ValueError("Cannot stop a watch that has not been started.")

        self._time = Time.current() - self._start
        self._total += self._time
        self._start = None

    @property
    def time(self):
        """Time between the last start and the last stop."""
        if self._time is None:
            raise ValueError("Cannot get time of watch that has not been stopped.")

        return self._time

    @property
    def time_sum(self):
        """Sum of times between all watch starts en stops."""
        return self._total


class StopwatchManager:
    """Simple class to organize various time measurements."""

    def __init__(self):
        """Initalize the basic private stopwatch attributes."""
        self._watch = {}

    def keys(self):
        """Get the list of all initialized stopwatch tags."""
        return self._watch.keys()

    def values(self):
        """Get the list of all initialized stopwatches."""
        return self._watch.values()

    def items(self):
        """Get the list of all (key, stopwatch) pairs."""
        return self._watch.items()

    def initialize(self, key):
        """Initialize one or more stopwatches.

        Parameters
        ----------
        key : Union[str, List[str]]
            Key or list of keys to initialize a `Stopwatch` for
        """
        keys = [key] if isinstance(key, str) else key
        for k in keys:
            self._watch[k] = Stopwatch()

    def reset(self):
        """Reset all stopwatches to their initial state."""
        self.initialize(list(self.keys()))

    def start(self, key):
        """Starts a stopwatch for a unique key.

        Parameters
        ----------
        key : str
            Key for which to start the clock
        """
        self[key].start()

    def stop(self, key):
        """Stops a stopwatch for a unique key.

        Parameters
        ----------
        key : str
            Key for which to stop the clock
        """
        self[key].stop()

    def time(self, key):
        """Returns the time recorded between the last start/stop pair.

        Parameters
        ----------
        key : str
            Key for which to return the time

        Returns
        -------
        Time
            Execution time of one iteration of a process
        """
        return self[key].time

    def times(self):
        """Returns the last time of each stopped stopwatch as a dictionary.

        Returns
        -------
        Dict[str, Time]
            Execution time of one iteration of each process
        """
        return {
            key: watch.time for key, watch in self.items() if watch._time is not None
        }

    def times_sum(self):
        """Returns the cumulative time of each stopwatch as a dictionary.

        Returns
        -------
        Dict[str, Time]
            Execution time of all iterations of each process so far
        """
        return {key: watch.time_sum for key, watch in self.items()}

    def update(self, other, prefix=None):
        """Updates this manager with the stopwatches of another manager.

        Parameters
        ----------
        other : StopwatchManager
             Manager from another process
        prefix : str, optional
             String to prefix the timer key with
        """
        for key, value in other.items():
            self._watch[key if prefix is None else f"{prefix}_{key}"] = value

    def __getitem__(self, key):
        if key not in self._watch:
            raise KeyError(f"No stopwatch initialized under the name: {key}")

        return self._watch[key]
