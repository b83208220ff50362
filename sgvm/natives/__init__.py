"""Built-in Console, Array and Date namespaces for running programs."""