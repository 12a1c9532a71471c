# review pyspark
## learning notes and worked examples for driving apache spark from python
## every computation here is delegated to spark, the package only holds the examples

__version__ = "0.1.0"
