"""Runtime services (telemetry) shared by the engine."""
