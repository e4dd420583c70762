"""
Module containing classes for reading and writing ray path files.

Includes reader and writer for hdf5 data files, as well as base reader and
writer classes which can be extended to read and write other file formats.

"""

import logging
import h5py
import numpy as np
from pyrefract.__about__ import __version__
from pyrefract.internal_functions import get_from_enum
from pyrefract.ray_tracing import DirChange, Start, Node, Path

logger = logging.getLogger(__name__)


class BaseReader:
    """
    Base class for reading ray paths from a file.

    Works as a context manager and allows for reading traced ray paths from
    the given file.

    Parameters
    ----------
    filename : str
        File name to open in read mode.

    Attributes
    ----------
    is_open

    """
    def __init__(self, filename):
        pass

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, type, value, traceback):
        self.close()

    def open(self):
        """
        Open the file for reading.

        """
        raise NotImplementedError

    def close(self):
        """
        Close the file.

        """
        raise NotImplementedError

    def __iter__(self):
        raise NotImplementedError

    @property
    def is_open(self):
        """
        Boolean of whether the file is currently open.

        """
        raise NotImplementedError


class BaseWriter:
    """
    Base class for writing ray paths to a file.

    Works as a context manager and allows for writing traced ray paths to the
    given file.

    Parameters
    ----------
    filename : str
        File name to open in write mode.

    Attributes
    ----------
    is_open

    """
    def __init__(self, filename, **kwargs):
        pass

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, type, value, traceback):
        self.close()

    def open(self):
        """
        Open the file for writing.

        """
        raise NotImplementedError

    def close(self):
        """
        Close the file.

        """
        raise NotImplementedError

    @property
    def is_open(self):
        """
        Boolean of whether the file is currently open.

        """
        raise NotImplementedError

    def add_path(self, path, name=None):
        """
        Add the given ray `path` to the file.

        Parameters
        ----------
        path : Path
            Traced ray path to be written.
        name : str or None, optional
            Name under which to store the path.

        """
        raise NotImplementedError


class HDF5Base:
    """
    Base class for readers and writers of hdf5 files.

    Defines parameters and methods to be used by the hdf5 I/O classes based on
    the version number of the file that is being worked with.

    Parameters
    ----------
    file_version_major : int
        Major portion of the file version number (X in X.Y).
    file_version_minor : int
        Minor portion of the file version number (Y in X.Y).

    Attributes
    ----------
    _file_version_major : int
        Major portion of the file version number (X in X.Y).
    _file_version_minor : int
        Minor portion of the file version number (Y in X.Y).

    """
    paths_group = "/paths"

    def __init__(self, file_version_major, file_version_minor):
        self._file_version_major = file_version_major
        self._file_version_minor = file_version_minor

    def _path_location(self, name):
        """Full location of the group for the path of the given name."""
        return self.paths_group+"/"+name

    @staticmethod
    def _encode_vectors(vectors):
        """Convert vectors to an array of shape (N, 3)."""
        return np.array([np.asarray(v, dtype=float) for v in vectors],
                        dtype=float).reshape((-1, 3))

    @staticmethod
    def _encode_indices(indices):
        """Convert indices of refraction to an array, with ``None`` as NaN."""
        return np.array([np.nan if nu is None else nu for nu in indices],
                        dtype=float)

    @staticmethod
    def _decode_indices(data):
        """Convert an array of indices of refraction, with NaN as ``None``."""
        return [None if np.isnan(nu) else float(nu) for nu in data]


class HDF5Reader(BaseReader, HDF5Base):
    """
    Class for reading ray paths from an hdf5 file.

    Works as a context manager. Paths are accessed by name, or iterated over
    in name order.

    Parameters
    ----------
    filename : str
        File name to open in read mode.

    Attributes
    ----------
    filename : str
        Name of the file (to be) opened.
    is_open

    Raises
    ------
    ValueError
        If `filename` does not have an hdf5 extension.

    """
    def __init__(self, filename):
        if filename.endswith(".hdf5") or filename.endswith(".h5"):
            self.filename = filename
        else:
            raise ValueError(filename+" is not in the HDF5 format")
        self._is_open = False

    def open(self):
        """
        Open the hdf5 file for reading.

        """
        self._file = h5py.File(self.filename, mode='r')
        self._is_open = True
        HDF5Base.__init__(self, self._file.attrs["version_major"],
                          self._file.attrs["version_minor"])
        logger.info("Opened %s for reading (file version %s.%s)",
                    self.filename, self._file_version_major,
                    self._file_version_minor)

    def close(self):
        """
        Close the hdf5 file.

        """
        self._file.close()
        self._is_open = False
        logger.info("Closed %s", self.filename)

    @property
    def is_open(self):
        """
        Boolean of whether the file is currently open.

        """
        return self._is_open

    def keys(self):
        """
        Names of the paths stored in the file.

        Returns
        -------
        list of str
            Sorted names of the stored paths.

        """
        if not self.is_open:
            raise IOError("File is not open")
        if self.paths_group not in self._file:
            return []
        return sorted(self._file[self.paths_group].keys())

    def __len__(self):
        """
        Length of the file (i.e. the number of paths stored).

        """
        return len(self.keys())

    def __contains__(self, name):
        return name in self.keys()

    def __iter__(self):
        """
        Iterable responsible for returning each path in turn.

        """
        for name in self.keys():
            yield self[name]

    def __getitem__(self, name):
        """
        Get the path of the given name from the file.

        Parameters
        ----------
        name : str
            Name of the stored path.

        Returns
        -------
        Path
            Reconstructed ray path, including its nodes and arc distances.

        Raises
        ------
        ValueError
            If no path of the given name exists in the file.

        """
        if not self.is_open:
            raise IOError("File is not open")
        loc = self._path_location(str(name))
        if loc not in self._file:
            raise ValueError("Path '"+str(name)+"' does not exist in "
                             +str(self.filename))
        group = self._file[loc]
        start = Start(group.attrs["start_tangent"],
                      group.attrs["start_location"])
        path = Path(start, float(group.attrs["save_step"]))

        incoming_tangents = group["incoming_tangents"][:]
        incoming_indices = self._decode_indices(group["incoming_indices"][:])
        locations = group["locations"][:]
        outgoing_indices = self._decode_indices(group["outgoing_indices"][:])
        outgoing_tangents = group["outgoing_tangents"][:]
        changes = group["changes"][:]
        for i in range(len(locations)):
            path.nodes.append(Node(incoming_tangents[i], incoming_indices[i],
                                   locations[i], outgoing_indices[i],
                                   outgoing_tangents[i],
                                   get_from_enum(int(changes[i]), DirChange)))
        path.arc_distances.extend(float(d) for d in
                                  group["arc_distances"][:])
        logger.debug("Read path '%s' with %i nodes", name, len(path.nodes))
        return path


class HDF5Writer(BaseWriter, HDF5Base):
    """
    Class for writing ray paths to an hdf5 file.

    Works as a context manager. Each path is stored in its own group under
    ``/paths``, holding one dataset per node quantity and the path's starting
    condition and save step as attributes. Indices of refraction without a
    value are stored as NaN.

    Parameters
    ----------
    filename : str
        File name to open in the given write mode. An ``.h5`` extension is
        added if the name has no hdf5 extension.
    mode : str, optional
        Mode with which to open the file. 'w' writes to the file, overwriting
        any existing data. 'x' writes to the file, failing if the file exists.
        'a' appends to the file, creating if the file doesn't exist. 'r+'
        appends to the file, failing if the file doesn't exist.

    Attributes
    ----------
    filename : str
        Name of the file (to be) opened.
    is_open

    """
    def __init__(self, filename, mode='x'):
        if filename.endswith(".hdf5") or filename.endswith(".h5"):
            self.filename = filename
        else:
            self.filename = filename+".h5"
        if mode not in ['w', 'x', 'a', 'r+']:
            raise ValueError("Unrecognized file mode '"+str(mode)+"'")
        self._mode = mode
        self._is_open = False

        # Set file version
        HDF5Base.__init__(self, 1, 0)

    def open(self):
        """
        Open the hdf5 file for writing.

        Opens the file in the mode given on initialization and records basic
        file-level metadata.

        """
        self._file = h5py.File(self.filename, mode=self._mode)
        self._is_open = True
        logger.info("Opened %s for writing (mode '%s')", self.filename,
                    self._mode)

        # Special append-mode opening method
        if ((self._mode=='a' or self._mode=='r+') and
                'version_major' in self._file.attrs):
            HDF5Base.__init__(self, self._file.attrs['version_major'],
                              self._file.attrs['version_minor'])
            if self.paths_group in self._file:
                self._counter = len(self._file[self.paths_group])
            else:
                self._counter = 0
            return

        self._file.attrs['version_major'] = self._file_version_major
        self._file.attrs['version_minor'] = self._file_version_minor
        self._file.attrs['pyrefract_version'] = __version__
        self._counter = 0

    def close(self):
        """
        Close the hdf5 file.

        """
        self._file.close()
        self._is_open = False
        logger.info("Closed %s", self.filename)

    @property
    def is_open(self):
        """
        Boolean of whether the file is currently open.

        """
        return self._is_open

    def add_path(self, path, name=None):
        """
        Add the given ray `path` to the file.

        Parameters
        ----------
        path : Path
            Traced ray path to be written.
        name : str or None, optional
            Name under which to store the path. If ``None``, uses a
            zero-padded count of the paths written to the file, skipping
            any count already used as a name.

        Returns
        -------
        str
            Name under which the path was stored.

        Raises
        ------
        IOError
            If the file is not open.
        ValueError
            If a path of the given name already exists in the file.

        """
        if not self.is_open:
            raise IOError("File is not open")
        if name is None:
            name = "{:06d}".format(self._counter)
            while self._path_location(name) in self._file:
                self._counter += 1
                name = "{:06d}".format(self._counter)
        loc = self._path_location(str(name))
        if loc in self._file:
            raise ValueError("Path '"+str(name)+"' already exists in "
                             +str(self.filename))

        group = self._file.create_group(loc)
        group.attrs["start_tangent"] = np.asarray(path.start.tangent)
        group.attrs["start_location"] = np.asarray(path.start.location)
        group.attrs["save_step"] = path.save_step

        nodes = path.nodes
        group.create_dataset("incoming_tangents",
                             data=self._encode_vectors(
                                 node.incoming_tangent for node in nodes
                             ))
        group.create_dataset("incoming_indices",
                             data=self._encode_indices(
                                 node.incoming_index for node in nodes
                             ))
        group.create_dataset("locations",
                             data=self._encode_vectors(
                                 node.location for node in nodes
                             ))
        group.create_dataset("outgoing_indices",
                             data=self._encode_indices(
                                 node.outgoing_index for node in nodes
                             ))
        group.create_dataset("outgoing_tangents",
                             data=self._encode_vectors(
                                 node.outgoing_tangent for node in nodes
                             ))
        group.create_dataset("changes", dtype=np.int8,
                             data=np.array([node.change.value
                                            for node in nodes],
                                           dtype=np.int8))
        group.create_dataset("arc_distances", dtype=float,
                             data=np.array(path.arc_distances, dtype=float))

        self._counter += 1
        logger.debug("Wrote path '%s' with %i nodes", name, len(nodes))
        return str(name)


class File:
    """
    Class for reading or writing ray path files.

    Works as a context manager and allows for reading or writing traced ray
    paths to the given file. Chooses the appropriate class for handling the
    given file type.

    Parameters
    ----------
    filename : str
        File name to open in the given write mode.
    mode : str, optional
        Mode with which to open the file.
    **kwargs
        Keyword arguments passed on to the appropriate file handler.

    Attributes
    ----------
    readers : dict
        Dictionary with file extensions as keys and values with the
        corresponding classes used to handle reading of those file types.
    writers : dict
        Dictionary with file extensions as keys and values with the
        corresponding classes used to handle writing of those file types.

    See Also
    --------
    pyrefract.io.HDF5Reader : Class for reading ray paths from an hdf5 file.
    pyrefract.io.HDF5Writer : Class for writing ray paths to an hdf5 file.

    """
    readers = {
        "h5": HDF5Reader,
        "hdf5": HDF5Reader,
    }

    writers = {
        "h5": HDF5Writer,
        "hdf5": HDF5Writer,
    }

    def __new__(cls, filename, mode='r', **kwargs):
        if '.' not in filename:
            raise ValueError("Unable to handle filenames without extensions")
        _, suffix = filename.rsplit(".", 1)

        if mode=='r':
            if suffix not in cls.readers:
                raise ValueError("Unable to read filenames with extension '."
                                 +suffix+"'")
            return cls.readers[suffix](filename, **kwargs)

        else:
            if suffix not in cls.writers:
                raise ValueError("Unable to write filenames with extension '."
                                 +suffix+"'")
            return cls.writers[suffix](filename, mode=mode, **kwargs)
