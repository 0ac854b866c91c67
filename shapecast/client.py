# Copyright (c) 2025 shapecast developers. All rights reserved.

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from shapecast.binder import Binder
from shapecast.encoding_helpers import ascii_str
from shapecast.exceptions import APIClientError
from shapecast.values import (
    KEYED_STRUCTURE,
    classify_value,
)


LOGGER = logging.getLogger(__name__)


class APIClient(object):

    """
    A simple client of a third-party JSON API, binding responses onto
    target types.

    Constructor args/kwargs:
        `base_url` (str):
            The URL paths passed to the methods are relative to.
        `binder` (optional; default: a new non-strict :class:`Binder`
        with an empty registry):
            The :class:`~shapecast.binder.Binder` to bind responses with.
        `session` (optional):
            A :class:`requests.Session` to be used (by default, a new
            one, with retries configured, is created).
        `timeout` (optional; default: :attr:`default_timeout`):
            To be passed into :meth:`requests.Session.get`.
        `retries` (optional; default: :attr:`default_retries`):
            The number of retries of failed requests (relevant only if
            `session` is not specified).
        `headers` (optional):
            A dict of additional HTTP headers.

    >>> client = APIClient('https://api.example.com/v1/')
    >>> client.make_url('/repos/octocat')
    'https://api.example.com/v1/repos/octocat'
    >>> client.make_url('https://other.example.org/x')
    'https://other.example.org/x'
    """

    default_timeout = 30
    default_retries = 3
    retry_backoff_factor = 0.5
    retry_status_forcelist = (429, 502, 503, 504)

    def __init__(self, base_url, binder=None, session=None,
                 timeout=None, retries=None, headers=None):
        self.base_url = base_url.rstrip('/')
        self.binder = binder if binder is not None else Binder()
        self.timeout = timeout if timeout is not None else self.default_timeout
        self.headers = dict(headers or {})
        self.headers.setdefault('Accept', 'application/json')
        self.session = (
            session if session is not None
            else self._make_session(retries if retries is not None else self.default_retries))

    def make_url(self, path):
        if path.startswith(('http://', 'https://')):
            return path
        return '{}/{}'.format(self.base_url, path.lstrip('/'))

    def get_json(self, path, params=None):
        """
        Get the JSON document from the given URL path (decoded).

        Raises:
            :exc:`~shapecast.exceptions.APIClientError` if the request
            fails, the response status indicates an error or the
            response body is not valid JSON.
        """
        url = self.make_url(path)
        try:
            response = self.session.get(url,
                                        params=params,
                                        headers=self.headers,
                                        timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            LOGGER.error('Request to %s failed (%s)', ascii_str(url), ascii_str(exc))
            raise APIClientError(url, exc, public_message=(
                'Request to "{}" failed.'.format(ascii_str(url)))) from exc
        try:
            return response.json()
        except ValueError as exc:
            LOGGER.error('Response from %s is not valid JSON (%s)',
                         ascii_str(url), ascii_str(exc))
            raise APIClientError(url, exc, public_message=(
                'Response from "{}" is not valid JSON.'.format(ascii_str(url)))) from exc

    def get_bound(self, path, model, params=None):
        """
        Get the JSON document from the given URL path and bind it onto
        a new instance of `model` (a class or other factory of target
        instances).

        If the document is a JSON array, a list is returned: its
        elements being objects are bound onto new `model` instances,
        other elements are kept verbatim.

        Any other non-null document causes
        :exc:`~shapecast.exceptions.APIClientError`.
        """
        data = self.get_json(path, params=params)
        if isinstance(data, list):
            return [
                (self.binder.build_object(model, item)
                 if classify_value(item) == KEYED_STRUCTURE
                 else item)
                for item in data]
        if data is not None and classify_value(data) != KEYED_STRUCTURE:
            url = self.make_url(path)
            LOGGER.error('Response from %s is neither a JSON object nor an array',
                         ascii_str(url))
            raise APIClientError(url, data, public_message=(
                'Response from "{}" is neither a JSON object nor an array.'
                .format(ascii_str(url))))
        return self.binder.build_object(model, data)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()


    #
    # non-public internals

    def _make_session(self, retries):
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=Retry(
            total=retries,
            backoff_factor=self.retry_backoff_factor,
            status_forcelist=self.retry_status_forcelist,
            allowed_methods=frozenset(['GET'])))
        session.mount('http://', adapter)
        session.mount('https://', adapter)
        return session
