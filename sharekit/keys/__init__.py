"""Built-in persistence keys: process-wide in-memory storage and JSON files."""