"""Relational schema for users and goals."""

USER_TABLE = """
CREATE TABLE IF NOT EXISTS "user" (
    userId INTEGER PRIMARY KEY AUTOINCREMENT,
    firstName TEXT NOT NULL,
    lastName TEXT NOT NULL,
    email TEXT NOT NULL,
    userStatus TEXT NOT NULL DEFAULT 'A' CHECK (userStatus IN ('N', 'A', 'L')),
    userPasswordHash TEXT NOT NULL,
    userAuthHash TEXT,
    userAuthTimestamp TEXT,
    userFailedLogons INTEGER NOT NULL DEFAULT 0 CHECK (userFailedLogons >= 0),
    userLastIP TEXT,
    isActive INTEGER NOT NULL DEFAULT 1,
    isDeleted INTEGER NOT NULL DEFAULT 0,
    datetimeUpdated TEXT
)
"""

GOAL_TABLE = """
CREATE TABLE IF NOT EXISTS goal (
    goalId INTEGER PRIMARY KEY AUTOINCREMENT,
    userId INTEGER NOT NULL REFERENCES "user" (userId),
    timespan TEXT NOT NULL,
    goalContent TEXT NOT NULL
)
"""

INDEXES = [
    'CREATE INDEX IF NOT EXISTS idx_user_email ON "user" (email)',
    'CREATE INDEX IF NOT EXISTS idx_user_auth_hash ON "user" (userAuthHash)',
    "CREATE INDEX IF NOT EXISTS idx_goal_user ON goal (userId)",
]

ALL_TABLES = [USER_TABLE, GOAL_TABLE]
