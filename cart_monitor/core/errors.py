class ExtractionError(Exception):
    """Nie udało się odczytać wymaganej wartości ze strony."""


class ParseError(ExtractionError, ValueError):
    """Tekst nie daje się zamienić na kwotę."""


class ElementNotFoundError(ExtractionError):
    """
    Żadna strategia nie znalazła widocznego elementu w limicie czasu.
    target: opis tego czego szukaliśmy (trafia do komunikatu).
    """
    def __init__(self, target: str, timeout: int | None = None):
        self.target = target
        self.timeout = timeout
        suffix = f" (timeout {timeout} ms)" if timeout is not None else ""
        super().__init__(f"Nie znaleziono elementu: {target}{suffix}")
