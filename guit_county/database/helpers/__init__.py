"""
Session handling for the service layer.

Contents
--------
- transactionManagement
    - ``SessionFactory``: sessions bound to the application engine
    - ``db_session_context``: context variable holding the session of the
      current call chain, so nested service calls share one transaction
    - ``@transactional``: opens a session when none is active, commits on
      success, rolls back and re-raises on error, and always closes it
"""
