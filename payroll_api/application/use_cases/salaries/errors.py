"""Error messages shared by the salary use cases."""


def company_not_found_message(company_id: int) -> str:
    return f"The Company with Id '{company_id}' was not found"


__all__ = ["company_not_found_message"]
