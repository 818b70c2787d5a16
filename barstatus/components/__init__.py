"""Functions that each read one system value for the status line."""