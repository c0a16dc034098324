"""Parser for employee JSON files."""

import json
from pathlib import Path

from pydantic import ValidationError

from folha_pagamento.core.models.employee import Employee
from folha_pagamento.shared.exceptions import CorruptedFileError, ParseError


def parse_employees(data: object) -> list[Employee]:
    """Build employees from decoded JSON.

    Accepts either a list of employee objects or ``{"employees": [...]}``.
    Monetary fields may be numbers or strings.
    """
    if isinstance(data, dict) and "employees" in data:
        data = data["employees"]
    if not isinstance(data, list):
        raise CorruptedFileError(
            "Arquivo deve conter uma lista de funcionários",
            {"type": type(data).__name__},
        )

    employees = []
    for index, raw in enumerate(data):
        try:
            employees.append(Employee.model_validate(raw))
        except ValidationError as e:
            raise ParseError(
                f"Funcionário na posição {index} inválido: {e.error_count()} erro(s)",
                {"index": index, "errors": e.errors(include_url=False)},
            ) from e
    return employees


def parse_employee_file(file_path: Path) -> list[Employee]:
    """Read employees from a JSON file.

    Raises:
        ParseError: If an entry fails validation
        CorruptedFileError: If the file is not valid JSON
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CorruptedFileError(
            f"JSON inválido em {file_path.name}: {e.msg} (linha {e.lineno})",
            {"file": str(file_path)},
        ) from e
    return parse_employees(data)
