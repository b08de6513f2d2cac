"""FinCEN Report 112 (Currency Transaction Report) elements and codes."""