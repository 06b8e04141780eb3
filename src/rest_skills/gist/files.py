"""Module for operations on the files of a gist."""

import logging

from ..exceptions import ConfigurationError
from ..models.gist import Gist, GistFile
from ..utils.decorators import check_write_access
from .client import GistClient

logger = logging.getLogger("rest-skills.gist")


class FilesMixin(GistClient):
    """Mixin for reading and editing the files of a gist."""

    def get_file(self, gist_id: str, filename: str | None = None) -> GistFile:
        """
        Get one file entry of a gist.

        Args:
            gist_id: The ID of the gist
            filename: Name of the file. Defaults to the first file name in
                sorted order.

        Returns:
            The GistFile, with the inline content the API returned

        Raises:
            ConfigurationError: If the gist has no file with that name
        """
        gist = Gist.from_api_response(
            self._request_json("GET", f"/gists/{gist_id}")
        )

        if not filename:
            if not gist.files:
                raise ConfigurationError(f"Gist {gist_id} has no files.")
            filename = gist.file_names[0]

        gist_file = gist.files.get(filename)
        if gist_file is None:
            available = ", ".join(gist.file_names)
            raise ConfigurationError(
                f"File '{filename}' not found in gist {gist_id}. Available: {available}"
            )

        return gist_file

    def fetch_content(self, gist_file: GistFile) -> str:
        """
        Get the full content of a file entry.

        Files the API flags as truncated (larger than 1 MB) are fetched from
        their raw URL instead of the inline ``content`` field.
        """
        if gist_file.needs_raw_fetch:
            logger.debug(
                f"'{gist_file.filename}' is truncated, fetching {gist_file.raw_url}"
            )
            return self._request("GET", gist_file.raw_url)

        return gist_file.content or ""

    def read_file(self, gist_id: str, filename: str | None = None) -> str:
        """Get the full content of a file in a gist."""
        return self.fetch_content(self.get_file(gist_id, filename))

    @check_write_access
    def update_file(self, gist_id: str, filename: str, content: str) -> Gist:
        """
        Replace the content of a file in a gist.

        Args:
            gist_id: The ID of the gist
            filename: Name of the file
            content: New file content

        Returns:
            The updated gist
        """
        payload = {"files": {filename: {"content": content}}}
        data = self._request_json("PATCH", f"/gists/{gist_id}", payload=payload)
        return Gist.from_api_response(data)

    @check_write_access
    def add_file(self, gist_id: str, filename: str, content: str) -> Gist:
        """
        Add a file to an existing gist.

        The API creates the file when the name is not part of the gist yet,
        so this is the same PATCH as update_file.
        """
        return self.update_file(gist_id, filename, content)

    @check_write_access
    def rename_file(self, gist_id: str, old_name: str, new_name: str) -> Gist:
        """
        Rename a file in a gist.

        Args:
            gist_id: The ID of the gist
            old_name: Current file name
            new_name: New file name

        Returns:
            The updated gist
        """
        payload = {"files": {old_name: {"filename": new_name}}}
        data = self._request_json("PATCH", f"/gists/{gist_id}", payload=payload)
        return Gist.from_api_response(data)

    @check_write_access
    def remove_file(self, gist_id: str, filename: str) -> Gist:
        """
        Remove a single file from a gist.

        Args:
            gist_id: The ID of the gist
            filename: Name of the file to remove

        Returns:
            The updated gist
        """
        payload = {"files": {filename: None}}
        data = self._request_json("PATCH", f"/gists/{gist_id}", payload=payload)
        return Gist.from_api_response(data)
