"""
SQL identifier quoting for both ends of the dump.

SQL Server names are bracket-quoted in the row queries sent to the source;
MySQL names are backtick-quoted in the generated script.
"""


def quote_mysql(name: str) -> str:
    """
    Quote a MySQL identifier.

    Examples:
        >>> quote_mysql("Users")
        '`Users`'
        >>> quote_mysql("odd`name")
        '`odd``name`'
    """
    escaped = name.replace("`", "``")
    return f"`{escaped}`"


def quote_mssql(name: str) -> str:
    """
    Quote a SQL Server identifier.

    Examples:
        >>> quote_mssql("Order Lines")
        '[Order Lines]'
        >>> quote_mssql("a]b")
        '[a]]b]'
    """
    escaped = name.replace("]", "]]")
    return f"[{escaped}]"
