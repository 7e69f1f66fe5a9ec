"""HTTP client for the LinguaLog JSON API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:5000/api'


class ApiClientError(Exception):
    """A non-2xx answer from the API, carrying the server's message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class LinguaLogClient:
    """
    One method per endpoint. ``login`` keeps the returned token and sends it
    as a bearer header on every later call.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        token: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.token = token
        self.timeout = timeout
        self.user_id: Optional[int] = None
        self.username: Optional[str] = None

    # ------------------------------------------------------------------ #
    # Transport
    # ------------------------------------------------------------------ #
    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None,
                 json: Optional[Dict[str, Any]] = None) -> Any:
        headers = {}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        response = self.session.request(
            method,
            f'{self.base_url}{path}',
            params=params,
            json=json,
            headers=headers,
            timeout=self.timeout,
        )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            message = None
            if isinstance(payload, dict):
                message = payload.get('error') or payload.get('message')
            message = message or response.reason or 'Request failed'
            logger.debug("%s %s failed with %s: %s", method, path, response.status_code, message)
            raise ApiClientError(response.status_code, message)
        return payload

    # ------------------------------------------------------------------ #
    # Auth
    # ------------------------------------------------------------------ #
    def signup(self, username: str, password: str, forgot_question: str, forgot_answer: str) -> Dict[str, Any]:
        return self._request('POST', '/auth/signup', json={
            'username': username,
            'password': password,
            'forgot_question': forgot_question,
            'forgot_answer': forgot_answer,
        })

    def login(self, username: str, password: str) -> Dict[str, Any]:
        result = self._request('POST', '/auth/login', json={'username': username, 'password': password})
        self.token = result['token']
        self.user_id = result['userId']
        self.username = result['username']
        return result

    def logout(self) -> None:
        self.token = None
        self.user_id = None
        self.username = None

    def verify(self, token: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Return ``{userId, username}`` for a valid token, ``None`` otherwise."""
        try:
            result = self._request('POST', '/auth/verify', json={'token': token or self.token})
        except ApiClientError as exc:
            if exc.status_code == 401:
                return None
            raise
        return {'userId': result['userId'], 'username': result['username']}

    def forgot_password(self, username: str, forgot_answer: Optional[str] = None) -> Dict[str, Any]:
        body = {'username': username}
        if forgot_answer:
            body['forgot_answer'] = forgot_answer
        return self._request('POST', '/auth/forgot-password', json=body)

    def reset_password(self, user_id: int, new_password: str, reset_token: Optional[str] = None) -> Dict[str, Any]:
        body = {'userId': user_id, 'newPassword': new_password}
        if reset_token:
            body['resetToken'] = reset_token
        return self._request('POST', '/auth/reset-password', json=body)

    # ------------------------------------------------------------------ #
    # Languages
    # ------------------------------------------------------------------ #
    def get_languages(self, user_id: int) -> List[Dict[str, Any]]:
        return self._request('GET', '/languages', params={'user_id': user_id})

    def create_language(self, user_id: int, language_code: str, language_name: str) -> Dict[str, Any]:
        return self._request('POST', '/languages', json={
            'user_id': user_id,
            'language_code': language_code,
            'language_name': language_name,
        })

    # ------------------------------------------------------------------ #
    # Learning items
    # ------------------------------------------------------------------ #
    def get_learning_items(self, user_id: int, language_id: Optional[int] = None,
                           date_filter: Optional[str] = None) -> List[Dict[str, Any]]:
        return self._request('GET', '/items', params={
            'user_id': user_id,
            'language_id': language_id,
            'date_filter': date_filter,
        })

    def create_learning_item(self, user_id: int, language_id: int, item_type: str, content: str,
                             **details: Any) -> Dict[str, Any]:
        body = {'user_id': user_id, 'language_id': language_id, 'type': item_type, 'content': content}
        body.update({key: value for key, value in details.items() if value is not None})
        return self._request('POST', '/items', json=body)

    def delete_learning_item(self, item_id: int) -> None:
        self._request('DELETE', '/items/delete', params={'id': item_id})

    # ------------------------------------------------------------------ #
    # Flashcards
    # ------------------------------------------------------------------ #
    def get_flashcards(self, user_id: int, language_id: Optional[int] = None,
                       date_filter: Optional[str] = None) -> List[Dict[str, Any]]:
        return self._request('GET', '/flashcards', params={
            'user_id': user_id,
            'language_id': language_id,
            'date_filter': date_filter,
        })

    def record_flashcard_session(self, user_id: int, item_id: int, was_correct: bool,
                                 language_id: Optional[int] = None) -> Dict[str, Any]:
        body = {'user_id': user_id, 'item_id': item_id, 'was_correct': bool(was_correct)}
        if language_id is not None:
            body['language_id'] = language_id
        return self._request('POST', '/flashcards', json=body)

    def get_flashcard_sessions(self, user_id: int, item_id: Optional[int] = None,
                               language_id: Optional[int] = None) -> List[Dict[str, Any]]:
        return self._request('GET', '/flashcards/sessions', params={
            'user_id': user_id,
            'item_id': item_id,
            'language_id': language_id,
        })
