"""Functions that instantiate IO tools from configuration blocks."""

from genprov.utils.factory import instantiate, module_dict

from . import read, write

READER_DICT = module_dict(read)
WRITER_DICT = module_dict(write)

__all__ = ["reader_factory", "writer_factory"]


def reader_factory(reader_cfg):
    """Instantiates reader based on type specified in configuration under
    `io.reader.name`. The name must match the name of a class under
    `genprov.io.read`.

    Parameters
    ----------
    reader_cfg : dict
        Reader configuration dictionary

    Returns
    -------
    object
        Reader object
    """
    return instantiate(READER_DICT, reader_cfg)


def writer_factory(writer_cfg):
    """Instantiates writer based on type specified in configuration under
    `io.writer.name`. The name must match the name of a class under
    `genprov.io.write`.

    Parameters
    ----------
    writer_cfg : dict
        Writer configuration dictionary

    Returns
    -------
    object
        Writer object
    """
    return instantiate(WRITER_DICT, writer_cfg)
