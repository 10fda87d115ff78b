"""Well Known Text tokenizing, layout checking and syntax errors."""