# Package initializer for abstractions
