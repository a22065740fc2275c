INDEX_OUT_OF_RANGE = "index out of range"
RANK_OUT_OF_RANGE = "rank out of range"
