"""Mirror-switching recipes, one module per system or tool family."""