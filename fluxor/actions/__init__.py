"""Sub-package set aside for action services; it holds no modules yet."""