class SearchListener:
    """
    Receives lifecycle notifications from a search. All hooks are no-ops;
    subclasses override the ones they need.

    The `search` argument exposes:
      * is_end_state(), is_error_state(), is_visited_state()
      * current_path()  – tuple of ChoicePoint from the root
      * state_id        – identifier of the current state
    """

    def search_started(self, search) -> None:
        pass

    def state_advanced(self, search) -> None:
        pass

    def state_backtracked(self, search) -> None:
        pass

    def search_finished(self, search) -> None:
        pass
