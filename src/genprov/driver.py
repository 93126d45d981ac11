"""genprov driver class.

Takes care of everything in one centralized place:
- Data reading
- Association graph and object building
- Post-processing
- Writing output to file
"""

import yaml

from .construct import BuildManager
from .io import reader_factory, writer_factory
from .post import PostManager
from .utils.logger import logger
from .utils.stopwatch import StopwatchManager
from .version import __version__

__all__ = ["Driver"]


class Driver:
    """Central genprov driver.

    Processes global configuration and runs the appropriate modules:
      1. Read one entry
      2. Build the association graph and the object collections
      3. Run post-processing
      4. Write to file

    It takes a configuration dictionary of the form:

    .. code-block:: yaml

        base:
          <Base driver configuration>
        io:
          <Input/output configuration>
        build:
          <Rules as to how to build the association graph and objects>
        post:
          <Post-processors>
    """

    def __init__(self, cfg):
        """Initializes the class attributes.

        Parameters
        ----------
        cfg : dict
            Global configuration dictionary
        """
        # Initialize the timers and the configuration dictionary
        self.watch = StopwatchManager()
        self.watch.initialize("iteration")

        # Process the full configuration dictionary and store it
        base, io, build, post = self.process_config(**cfg)

        # Initialize the base driver configuration parameters
        self.iterations = base.get("iterations", -1)

        # Initialize the input/output
        self.initialize_io(**io)

        # Initialize the graph and object builder
        self.watch.initialize("build")
        self.builder = BuildManager(**(build or {}))

        # Initialize the post-processors
        self.post = None
        if post is not None:
            self.watch.initialize("post")
            self.post = PostManager(post)

    def process_config(self, io, base=None, build=None, post=None):
        """Reads the configuration and dumps it to the logger.

        Parameters
        ----------
        io : dict
            I/O configuration dictionary
        base : dict, optional
            Base driver configuration dictionary
        build : dict, optional
            Graph and object building configuration dictionary
        post : dict, optional
            Post-processor configutation dictionary

        Returns
        -------
        dict
            Processed configuration
        """
        # If there is no base configuration, make it empty (will use defaults)
        if base is None:
            base = {}

        # Set the verbosity of the logger
        verbosity = base.get("verbosity", "info")
        logger.setLevel(verbosity.upper())

        # Rebuild global configuration dictionary
        self.cfg = {"base": base, "io": io}
        if build is not None:
            self.cfg["build"] = build
        if post is not None:
            self.cfg["post"] = post

        # Log environment information
        logger.info("Release version: %s\n", __version__)

        # Log configuration
        logger.info(yaml.dump(self.cfg, default_flow_style=None, sort_keys=False))

        # Return updated configuration
        return base, io, build, post

    def initialize_io(self, reader, writer=None):
        """Initializes the input/output scripts.

        Parameters
        ----------
        reader : dict
            Reader configuration dictionary
        writer : dict, optional
            Writer configuration dictionary
        """
        # Initialize the reader
        self.watch.initialize("read")
        self.reader = reader_factory(reader)

        # Initialize the data writer, if provided
        self.writer = None
        if writer is not None:
            self.watch.initialize("write")
            self.writer = writer_factory(writer)

        # Harmonize the number of iterations with the number of entries
        if self.iterations is None or self.iterations < 0:
            self.iterations = len(self.reader)
        assert self.iterations <= len(self.reader), (
            f"Requested {self.iterations} iterations, but only "
            f"{len(self.reader)} entries are available."
        )

    def __len__(self):
        """Returns the number of entries in the underlying reader object.

        Returns
        -------
        int
            Number of elements in the underlying reader.
        """
        return len(self.reader)

    def __iter__(self):
        """Resets the counter and returns itself.

        Returns
        -------
        object
            The Driver itself
        """
        self.counter = 0

        return self

    def __next__(self):
        """Defines how to process the next entry in the iterator.

        Returns
        -------
        dict
            Data dictionary of the processed entry
        """
        # If there are more entries to go through, return data
        if self.counter < len(self):
            data = self.process(self.counter)
            self.counter += 1

            return data

        raise StopIteration

    def run(self):
        """Loop over the requested number of iterations, process them."""
        # Loop and process each iteration
        for iteration in range(self.iterations):
            self.process(iteration)

        # Dump the cumulative time spent in each step
        logger.info("Processed %d entries.", self.iterations)
        for key, value in self.watch.times_sum().items():
            logger.info(
                "  - %-24s wall: %10.3f s | cpu: %10.3f s", key, value.wall, value.cpu
            )

    def process(self, entry):
        """Process one entry.

        Run single step of main genprov driver. This includes data reading,
        graph and object building, post-processing and writing the provenance
        records of each object to file.

        Parameters
        ----------
        entry : int
            Entry number to process

        Returns
        -------
        dict
            Data dictionary of the processed entry
        """
        # 0. Make sure there is no watch running, start the iteration timer
        for watch in self.watch.values():
            if watch.running:
                self.watch.reset()
                break

        self.watch.start("iteration")

        # 1. Read data
        self.watch.start("read")
        data = self.reader.get(entry)
        self.watch.stop("read")

        # 2. Build the association graph and the objects
        self.watch.start("build")
        self.builder(data)
        self.watch.stop("build")

        # 3. Run post-processing, if requested
        if self.post is not None:
            self.watch.start("post")
            self.post(data)
            self.watch.stop("post")
            self.watch.update(self.post.watch, "post")

        # 4. Write output to file, if requested
        if self.writer is not None:
            self.watch.start("write")
            self.writer(data, self.cfg)
            self.watch.stop("write")

        # Stop the iteration timer
        self.watch.stop("iteration")

        # Log the time spent on this entry
        logger.debug(
            "Entry %d processed in %.3f s (wall)",
            data["index"],
            self.watch.time("iteration").wall,
        )

        return data
