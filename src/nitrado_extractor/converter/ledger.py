"""Registry of operation ids issued during one conversion run."""


class OperationIdLedger:
    """Tracks used operation ids and resolves collisions with numeric suffixes."""

    def __init__(self):
        self._used: set[str] = set()

    def __contains__(self, operation_id: str) -> bool:
        return operation_id in self._used

    def __len__(self) -> int:
        return len(self._used)

    def reset(self) -> None:
        """Forget every issued id."""
        self._used.clear()

    def reserve(self, candidate: str) -> str:
        """
        Register an id, suffixing it if it was already issued.

        Args:
            candidate: The preferred operation id

        Returns:
            The candidate itself when unused, otherwise the first free
            ``candidate2``, ``candidate3``, ...
        """
        unique_id = candidate
        counter = 2
        while unique_id in self._used:
            unique_id = f"{candidate}{counter}"
            counter += 1

        self._used.add(unique_id)
        return unique_id
