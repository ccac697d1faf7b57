"""Interactive review of unmanaged packages: actions, strategies and the session."""