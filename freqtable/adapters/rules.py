from freqtable.rules.models import Rules


class ReportRulesAdapter:
    """Adapter to map generic Rules to Report component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.report

    def get_column_widths(self) -> dict[str, int]:
        return self._rules.columns.model_dump()

    def get_banner_width(self) -> int:
        return self._rules.banner_width

    def get_large_input_threshold(self) -> int:
        return self._rules.large_input_threshold

    def get_sample_size(self) -> int:
        return self._rules.sample_size


class CasesRulesAdapter:
    """Adapter to map generic Rules to Cases component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.cases

    def get_fail_fast(self) -> bool:
        return self._rules.fail_fast
