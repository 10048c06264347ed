"""Built-in conventions for common CRUD action shapes.

Action names match by prefix (``get``, ``get_widget``, ``getWidget``), the
``id`` parameter by suffix (``id``, ``widget_id``, ``widgetId``) and the
``model`` parameter by position only.
"""

from __future__ import annotations

from typing import Annotated

from apiconvention.adapters.python import (
    api_convention_name_match,
    produces_default_response_type,
    produces_response_type,
)
from apiconvention.domain.model import (
    ApiConventionNameMatch,
    ApiConventionTypeMatch,
    NameMatchBehavior,
    TypeMatchBehavior,
)

_Id = Annotated[
    object,
    ApiConventionNameMatch(behavior=NameMatchBehavior.SUFFIX),
    ApiConventionTypeMatch(behavior=TypeMatchBehavior.ANY),
]
_Model = Annotated[
    object,
    ApiConventionNameMatch(behavior=NameMatchBehavior.ANY),
    ApiConventionTypeMatch(behavior=TypeMatchBehavior.ANY),
]


class DefaultApiConventions:
    @staticmethod
    @produces_response_type(200)
    @produces_response_type(404)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def get(id: _Id) -> None: ...  # noqa: A002

    @staticmethod
    @produces_response_type(200)
    @produces_response_type(404)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def find(id: _Id) -> None: ...  # noqa: A002

    @staticmethod
    @produces_response_type(201)
    @produces_response_type(400)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def post(model: _Model) -> None: ...

    @staticmethod
    @produces_response_type(201)
    @produces_response_type(400)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def create(model: _Model) -> None: ...

    @staticmethod
    @produces_response_type(204)
    @produces_response_type(404)
    @produces_response_type(400)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def put(id: _Id, model: _Model) -> None: ...  # noqa: A002

    @staticmethod
    @produces_response_type(204)
    @produces_response_type(404)
    @produces_response_type(400)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def edit(id: _Id, model: _Model) -> None: ...  # noqa: A002

    @staticmethod
    @produces_response_type(204)
    @produces_response_type(404)
    @produces_response_type(400)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def update(id: _Id, model: _Model) -> None: ...  # noqa: A002

    @staticmethod
    @produces_response_type(200)
    @produces_response_type(404)
    @produces_response_type(400)
    @produces_default_response_type()
    @api_convention_name_match(NameMatchBehavior.PREFIX)
    def delete(id: _Id) -> None: ...  # noqa: A002
